"""Tests for the rastercmd-encode CLI."""

import pytest
from PIL import Image

from rastercmd.cli.encode import main


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "square.png"
    Image.new("RGBA", (8, 8), (0, 0, 0, 255)).save(path)
    return path


@pytest.fixture
def no_config(tmp_path):
    return tmp_path / "missing.yaml"


class TestEncodeCLI:
    """Tests for the encode command."""

    def test_writes_output_file(self, image_path, no_config, tmp_path):
        out = tmp_path / "out.bin"
        result = main([str(image_path), "-l", "epl", "-o", str(out), "-c", str(no_config)])

        assert result == 0
        assert out.read_bytes() == b"GW0,0,1,8," + b"\x00" * 8

    def test_position_options(self, image_path, no_config, tmp_path):
        out = tmp_path / "out.cpcl"
        result = main([str(image_path), "-l", "cpcl", "-x", "4", "-y", "9", "-o", str(out), "-c", str(no_config)])

        assert result == 0
        assert out.read_bytes().startswith(b"EG 1 8 4 9 ")

    def test_config_file(self, image_path, tmp_path):
        config = tmp_path / "rastercmd.yaml"
        config.write_text("language: zpl\n")
        out = tmp_path / "out.zpl"

        result = main([str(image_path), "-o", str(out), "-c", str(config)])

        assert result == 0
        assert out.read_bytes() == b"^GFA,8,8,1,FFFFFFFFFFFFFFFF"

    def test_hex_dump(self, image_path, no_config, tmp_path):
        out = tmp_path / "out.txt"
        result = main([str(image_path), "-l", "escp", "--hex", "-o", str(out), "-c", str(no_config)])

        assert result == 0
        assert out.read_text().startswith("1B 33 18 1B 2A 20 08 00")

    def test_stdout(self, image_path, no_config, capsysbinary):
        result = main([str(image_path), "-l", "zpl", "-c", str(no_config)])

        assert result == 0
        assert capsysbinary.readouterr().out == b"^GFA,8,8,1,FFFFFFFFFFFFFFFF"

    def test_missing_image(self, tmp_path, no_config, capsys):
        result = main([str(tmp_path / "nope.png"), "-l", "zpl", "-c", str(no_config)])

        assert result == 1
        assert "Image file not found" in capsys.readouterr().err

    def test_unsupported_language(self, image_path, no_config, capsys):
        result = main([str(image_path), "-l", "postscript", "-c", str(no_config)])

        assert result == 1
        assert "not yet supported" in capsys.readouterr().err

    def test_invalid_threshold(self, image_path, no_config, capsys):
        result = main([str(image_path), "-l", "zpl", "--luma-threshold", "300", "-c", str(no_config)])

        assert result == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_unsupported_language_in_config_file(self, image_path, tmp_path, capsys):
        config = tmp_path / "rastercmd.yaml"
        config.write_text("language: pcl\n")

        result = main([str(image_path), "-c", str(config)])

        assert result == 1
        err = capsys.readouterr().err
        assert "not yet supported for language 'pcl'" in err
        assert "Invalid configuration" not in err

    def test_config_file_not_a_mapping(self, image_path, tmp_path, capsys):
        config = tmp_path / "rastercmd.yaml"
        config.write_text("- zpl\n")

        result = main([str(image_path), "-c", str(config)])

        assert result == 1
        assert "must contain a mapping" in capsys.readouterr().err
