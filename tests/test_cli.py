"""Tests for the command-line wrapper."""

import pytest

import main
from utils.image_io import load_image, save_image
from utils.test_images import generate_noise


def test_compress_synthetic(tmp_path, capsys):
    out = tmp_path / "out.png"
    code = main.main(["compress", str(out), "--synthetic", "checkerboard", "--ratio", "0.3"])
    assert code == 0
    assert load_image(out).shape == (256, 256)
    assert "PSNR RGB" in capsys.readouterr().out


def test_invalid_ratio_exit_code(tmp_path):
    src = tmp_path / "in.png"
    save_image(generate_noise(4), src)
    assert main.main(["compress", str(src), str(tmp_path / "out.png"), "--ratio", "2"]) == 1


def test_missing_input_exit_code(tmp_path):
    assert main.main(["flip", str(tmp_path / "nope.png"), str(tmp_path / "out.png")]) == 1


@pytest.mark.parametrize("args", [
    ["flip", "--axis", "vertical"],
    ["color", "--op", "gray-intensity"],
    ["color", "--op", "brighten", "--amount", "0.2"],
    ["filter", "--kernel", "edges"],
])
def test_transforms(tmp_path, args):
    src = tmp_path / "in.png"
    out = tmp_path / "out.png"
    save_image(generate_noise(5, 7), src)
    command, options = args[0], args[1:]
    assert main.main([command, str(src), str(out), *options]) == 0
    assert load_image(out).shape == (5, 7)


def test_usage_error():
    with pytest.raises(SystemExit) as exc:
        main.main(["filter", "a.png", "b.png", "--kernel", "emboss"])
    assert exc.value.code == 2


def test_compress_needs_input_or_synthetic(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main.main(["compress", str(tmp_path / "out.png")])
    assert exc.value.code == 2


def test_workers_flag_reaches_thread_pool(tmp_path, monkeypatch):
    import engines.parallel
    sizes = []
    base = engines.parallel.ThreadPoolExecutor

    class RecordingExecutor(base):
        def __init__(self, max_workers=None, *args, **kwargs):
            sizes.append(max_workers)
            super().__init__(max_workers, *args, **kwargs)

    monkeypatch.setattr(engines.parallel, "ThreadPoolExecutor", RecordingExecutor)
    out = str(tmp_path / "out.png")
    assert main.main(["compress", out, "--synthetic", "noise", "--workers", "1"]) == 0
    assert sizes == []
    assert main.main(["compress", out, "--synthetic", "noise", "--workers", "16"]) == 0
    assert sizes[0] == 4 and 4 in sizes[1:]


def test_bad_log_level_exit_code(tmp_path, monkeypatch):
    from utils import config
    bad = config.Settings(1, False, config.COEFFICIENT_EPSILON, "VERBOSE")
    monkeypatch.setattr(config.configure_logging, "__defaults__", (bad,))
    assert main.main(["compress", str(tmp_path / "out.png"), "--synthetic", "noise"]) == 1
