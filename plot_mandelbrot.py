from pathlib import Path

from mandelbrot import (
    DEFAULT_PLOT_CONFIG,
    PlotConfig,
    PresentationError,
    create_canvas,
    render,
)

VERBOSE = False


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


def plot(config: PlotConfig) -> Path:
    """Render the configured viewport and write it to ``config.output_path``."""

    root = create_canvas(config.output_path, config.size)
    log("Canvas: %dx%d -> %s" % (config.width, config.height, root.path))
    root.fill(config.background)

    plotting_area = root.configure_viewport(
        config.real_range,
        config.imag_range,
        margin=config.margin,
        x_label_area=config.x_label_area,
        y_label_area=config.y_label_area,
    )
    plotting_area.draw_axes()

    cols, rows = plotting_area.pixel_range()
    grid = (len(cols), len(rows))
    log("Plotting area: columns %d-%d, rows %d-%d" % (cols.start, cols.stop - 1, rows.start, rows.stop - 1))
    log("Max iterations: %d" % config.max_iterations)

    written = render(
        config.viewport,
        grid,
        config.max_iterations,
        plotting_area.set_pixel,
        inside_color=config.inside_color,
    )
    log("Pixels written: %d" % written)

    return root.present()


def main(config: PlotConfig = DEFAULT_PLOT_CONFIG, verbose: bool = False) -> None:
    global VERBOSE
    VERBOSE = bool(verbose)

    try:
        output_path = plot(config)
    except PresentationError as exc:
        raise SystemExit(str(exc)) from exc

    print("Result has been saved to {0}".format(output_path))


if __name__ == '__main__':
    main()
