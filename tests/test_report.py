import json

from docu_extractor.report import ReportGenerator, render_tree
from docu_extractor.utils import format_size
from docu_extractor.writer import ExtractedFile


def test_render_tree():
    assert render_tree("output", ["a.txt", "b.png", "c.xml"]) == "output/\n├── a.txt\n├── b.png\n└── c.xml"


def test_render_tree_single_and_empty():
    assert render_tree("output/", ["note.txt"]) == "output/\n└── note.txt"
    assert render_tree("output", []) == "output/"


def test_save_report(tmp_path):
    gen = ReportGenerator(tmp_path)
    gen.set_archive_info(str(tmp_path / "sample.env"), 2048)
    gen.add_extracted_files(
        [
            ExtractedFile(filename="a.txt", extension="txt", offset=0, size=10, is_text=True),
            ExtractedFile(filename="b.bin", extension="bin", offset=64, size=20, is_text=False),
        ]
    )

    text_path = gen.save_report()

    text = text_path.read_text(encoding="utf-8")
    assert "DOCU ARCHIVE EXTRACTION REPORT" in text
    assert "sample.env" in text
    assert "(1 text, 1 binary)" in text

    data = json.loads((tmp_path / "extraction_report.json").read_text(encoding="utf-8"))
    assert data["archive_file"] == "sample.env"
    assert data["total_files"] == 2
    assert data["total_bytes"] == 30
    assert [f["filename"] for f in data["files"]] == ["a.txt", "b.bin"]


def test_text_report_sizes_match_log_format(tmp_path):
    gen = ReportGenerator(tmp_path)
    gen.set_archive_info("sample.env", 2048)
    gen.add_extracted_files([ExtractedFile(filename="a.txt", extension="txt", offset=0, size=512, is_text=True)])

    text = gen.generate_text_report()

    assert f"Archive Size: {format_size(2048)}" in text
    assert "2.00 KB" in text
    assert "512.00 B" in text
