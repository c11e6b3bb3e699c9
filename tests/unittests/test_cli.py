import pytest
from typer.testing import CliRunner

from logobaker.cli import app

runner = CliRunner()


@pytest.fixture
def project(tmp_path, make_image, write_json, monkeypatch):
    monkeypatch.chdir(tmp_path)
    make_image("logo.png", 100, 50, (255, 0, 0, 255))
    make_image("photo.jpg", 1000, 600, (255, 255, 255, 255))
    write_json(
        "config.json",
        {
            "logoWidthMagnification": 0.2,
            "logoMarginMagnification": 0.05,
            "logoAlphaValue": 0.8,
            "useTmpDir": True,
            "logoImgPath": "logo.png",
        },
    )
    write_json(
        "profiles.json",
        [
            {"size": 300, "format": "png", "prefix": "", "suffix": "_s"},
            {"size": 150, "format": "webp", "prefix": "t_", "suffix": ""},
        ],
    )
    return tmp_path


def test_watermark_command(project):
    result = runner.invoke(app, ["watermark", "photo.jpg"])
    assert result.exit_code == 0, result.output
    assert (project / "tmp" / "photo_s.png").exists()
    assert (project / "tmp" / "t_photo.webp").exists()
    assert "photo_s.png" in result.output


def test_watermark_requires_image(project):
    result = runner.invoke(app, ["watermark"])
    assert result.exit_code != 0


def test_watermark_missing_config(project):
    result = runner.invoke(app, ["watermark", "photo.jpg", "--config", "missing.json"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_watermark_missing_image(project):
    result = runner.invoke(app, ["watermark", "nope.jpg"])
    assert result.exit_code == 1
    assert not (project / "tmp").exists()


def test_ogp_command(project, make_image, write_json, font_bytes):
    (project / "assets").mkdir()
    (project / "assets" / "font.ttf").write_bytes(font_bytes)
    make_image("assets/bg.jpg", 1200, 800, (30, 60, 90, 255))
    make_image("assets/logo.png", 200, 100, (255, 255, 255, 255))
    make_image("assets/a.png", 50, 50, (0, 255, 0, 255))
    make_image("assets/b.png", 50, 50, (0, 0, 255, 255))
    write_json(
        "ogp.json",
        {
            "imgWidth": 600,
            "imgHeight": 315,
            "logoWidthMagnification": 0.3,
            "elementWidthMagnification": 0.1,
            "elementMarginMagnification": 0.02,
            "fontSize": 24,
            "bgAlphaValue": 0.8,
            "outFormat": "png,jpg",
            "bgImgPath": "bg.jpg",
            "logoImgPath": "logo.png",
            "fontBinPath": "font.ttf",
            "srcDir": "assets",
            "destDir": "out",
        },
    )
    result = runner.invoke(
        app,
        ["ogp", "-e", "a.png,b.png", "-t", "Hello", "-p", "30", "-o", "hello", "--config", "ogp.json"],
    )
    assert result.exit_code == 0, result.output
    assert (project / "out" / "hello.png").exists()
    assert (project / "out" / "hello.jpg").exists()


def test_info_command(project):
    result = runner.invoke(app, ["info", "photo.jpg"])
    assert result.exit_code == 0
    assert "1000 x 600" in result.output
    assert "jpeg" in result.output


def test_version_command():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "LogoBaker version" in result.output
