import pytest

from demo import main


def test_render_small_image(tmp_path, capsys):
    out = tmp_path / "img.ppm"
    assert main(["--width", "4", "--height", "3", "--max-depth", "0",
                 "--workers", "1", "--output", str(out)]) == 0
    data = out.read_bytes()
    assert data.startswith(b"P6\n4 3\n255\n")
    assert len(data) == len(b"P6\n4 3\n255\n") + 4 * 3 * 3
    assert "Done!" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["--width", "0"], ["--fov", "5"], ["--workers", "0"],
                                  ["--max-depth", "-1"]])
def test_invalid_arguments_exit(argv, tmp_path):
    with pytest.raises(SystemExit):
        main(argv + ["--output", str(tmp_path / "x.ppm")])
