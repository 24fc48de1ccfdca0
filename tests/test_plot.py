import numpy as np
import PIL.Image
import pytest

import plot_mandelbrot
from mandelbrot.colors import BLACK, WHITE
from mandelbrot.config import DEFAULT_PLOT_CONFIG, default_plot_config


def small_config(tmp_path, **overrides):
    values = dict(output_path=str(tmp_path / "mandelbrot.png"), width=160, height=120, max_iterations=40)
    values.update(overrides)
    return default_plot_config(**values)


def test_default_config_matches_reference_plot():
    config = DEFAULT_PLOT_CONFIG
    assert config.output_path == "mandelbrot.png"
    assert config.size == (1600, 1200)
    assert config.viewport.real_range == (-2.1, 0.6)
    assert config.viewport.imag_range == (-1.2, 1.2)
    assert config.max_iterations == 100
    assert (config.margin, config.x_label_area, config.y_label_area) == (20, 10, 10)


def test_default_plot_config_overrides_fields():
    config = default_plot_config(max_iterations=7)
    assert config.max_iterations == 7
    assert config.size == DEFAULT_PLOT_CONFIG.size


def test_plot_writes_image(tmp_path):
    config = small_config(tmp_path)
    path = plot_mandelbrot.plot(config)

    with PIL.Image.open(path) as image:
        assert image.format == "PNG"
        assert image.size == (160, 120)
        pixels = np.asarray(image.convert("RGB"))

    assert tuple(pixels[0, 0]) == WHITE
    assert tuple(pixels[-1, -1]) == WHITE

    # Plot spans columns 30..139 and rows 20..89 for a 160x120 canvas.
    plot = pixels[20:90, 30:140]
    assert not (plot == 255).all(axis=-1).any()
    assert (plot == 0).all(axis=-1).any()


def test_in_set_point_is_black(tmp_path):
    config = small_config(tmp_path)
    surface_path = plot_mandelbrot.plot(config)

    # -0.25 + 0i lies in the main cardioid; map it the same way the plot does.
    width, height = 160 - 50, 120 - 50
    col = 30 + int(np.floor((-0.25 + 2.1) / 2.7 * width + 1e-3))
    row = 20 + height - 1 - int(np.floor(1.2 / 2.4 * height + 1e-3))
    with PIL.Image.open(surface_path) as image:
        assert image.convert("RGB").getpixel((col, row)) == BLACK


def test_main_reports_output(tmp_path, capsys):
    config = small_config(tmp_path, max_iterations=10)
    plot_mandelbrot.main(config)
    out = capsys.readouterr().out
    assert out.strip() == f"Result has been saved to {tmp_path / 'mandelbrot.png'}"


def test_main_verbose_logs_details(tmp_path, capsys):
    config = small_config(tmp_path, max_iterations=10)
    plot_mandelbrot.main(config, verbose=True)
    out = capsys.readouterr().out
    assert "Pixels written: 7700" in out
    assert "Max iterations: 10" in out
    plot_mandelbrot.main(config)
    assert "Pixels written" not in capsys.readouterr().out


def test_main_exits_on_presentation_failure(tmp_path, capsys):
    config = small_config(tmp_path, output_path=str(tmp_path), max_iterations=5)
    with pytest.raises(SystemExit) as excinfo:
        plot_mandelbrot.main(config)
    assert "Unable to write result" in str(excinfo.value.code)
    assert "Result has been saved" not in capsys.readouterr().out


def test_invalid_margins_propagate(tmp_path):
    config = small_config(tmp_path, width=40, height=40)
    with pytest.raises(ValueError):
        plot_mandelbrot.main(config)
