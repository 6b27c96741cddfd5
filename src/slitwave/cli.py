"""Command-line interface for the double-slit interference renderer."""

from dataclasses import replace
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from slitwave.core.errors import SlitwaveError

app = typer.Typer(
    name="slitwave",
    help="Double-slit interference video renderer",
    add_completion=False,
)
console = Console()


def _load(
    preset: Optional[str],
    frames: Optional[int],
    width: Optional[int],
    height: Optional[int],
    distance: Optional[float],
    workers: Optional[int],
):
    """Merge command-line overrides into the environment settings."""
    from slitwave.core.config import RenderSettings, get_settings

    settings = get_settings()
    updates = {
        "preset": preset,
        "num_frames": frames,
        "width": width,
        "height": height,
        "distance": distance,
        "workers": workers,
    }
    updates = {k: v for k, v in updates.items() if v is not None}
    if updates:
        settings.render = RenderSettings.model_validate({**settings.render.model_dump(), **updates})
    return settings


def _log(message):
    """Print progress lines verbatim; paths may contain square brackets."""
    console.print(message, markup=False, highlight=False)


def _fail(err: Exception):
    console.print(f"[red]Error:[/red] {escape(str(err))}")
    raise typer.Exit(code=1)


@app.command()
def render(
    preset: Annotated[Optional[str], typer.Option(help="Configuration preset")] = None,
    frames: Annotated[Optional[int], typer.Option(help="Frame count (renders 1..frames-1)")] = None,
    width: Annotated[Optional[int], typer.Option(help="Screen width (short axis)")] = None,
    height: Annotated[Optional[int], typer.Option(help="Screen height (interference axis)")] = None,
    distance: Annotated[Optional[float], typer.Option(help="Slit-to-screen distance")] = None,
    workers: Annotated[Optional[int], typer.Option(help="Render threads (default: CPU count)")] = None,
    render_dir: Annotated[Optional[Path], typer.Option(help="Frame output directory")] = None,
):
    """Render frames to PNG files without encoding a video."""
    _run(preset, frames, width, height, distance, workers, render_dir, output=None, assemble=False)


@app.command()
def run(
    preset: Annotated[Optional[str], typer.Option(help="Configuration preset")] = None,
    frames: Annotated[Optional[int], typer.Option(help="Frame count (renders 1..frames-1)")] = None,
    width: Annotated[Optional[int], typer.Option(help="Screen width (short axis)")] = None,
    height: Annotated[Optional[int], typer.Option(help="Screen height (interference axis)")] = None,
    distance: Annotated[Optional[float], typer.Option(help="Slit-to-screen distance")] = None,
    workers: Annotated[Optional[int], typer.Option(help="Render threads (default: CPU count)")] = None,
    render_dir: Annotated[Optional[Path], typer.Option(help="Frame output directory")] = None,
    output: Annotated[Optional[Path], typer.Option(help="Output video file")] = None,
):
    """Render all frames and assemble them into a video."""
    _run(preset, frames, width, height, distance, workers, render_dir, output=output, assemble=True)


def _run(preset, frames, width, height, distance, workers, render_dir, output, assemble):
    from slitwave.pipeline import Pipeline

    try:
        settings = _load(preset, frames, width, height, distance, workers)
        pipeline = Pipeline(
            sim_config=settings.simulation_config(),
            video_config=settings.video_config(),
            render_dir=render_dir or settings.render.render_dir,
            output_path=output or settings.video.output_path,
            filename_pattern=settings.render.filename_pattern,
            num_workers=settings.render.workers,
            assemble=assemble,
            log_fn=_log,
        )
        result = pipeline.run()
    except (SlitwaveError, ValueError, OSError) as e:
        _fail(e)

    if result is not None:
        console.print(f"[green]Video created: {escape(str(result))}[/green]")
    else:
        console.print(f"[green]{pipeline.frames_rendered} frames written to {escape(str(pipeline.render_dir))}[/green]")


@app.command()
def assemble(
    render_dir: Annotated[Optional[Path], typer.Option(help="Directory holding rendered frames")] = None,
    output: Annotated[Optional[Path], typer.Option(help="Output video file")] = None,
    fps: Annotated[Optional[int], typer.Option(help="Video frame rate")] = None,
    crf: Annotated[Optional[int], typer.Option(help="Constant rate factor (lower = better)")] = None,
):
    """Encode previously rendered frames into a video."""
    from slitwave.core.config import get_settings
    from slitwave.pipeline import VideoWriter

    try:
        settings = get_settings()
        video_config = settings.video_config()
        if fps is not None or crf is not None:
            video_config = replace(
                video_config,
                framerate=fps if fps is not None else video_config.framerate,
                crf=crf if crf is not None else video_config.crf,
            )

        frames_dir = render_dir or settings.render.render_dir
        output_path = output or settings.video.output_path
        pattern = str(frames_dir / settings.render.filename_pattern)

        output_path.unlink(missing_ok=True)
        VideoWriter(video_config, log_fn=_log).assemble(pattern, output_path)
    except (SlitwaveError, ValueError, OSError) as e:
        _fail(e)

    console.print(f"[green]Video created: {escape(str(output_path))}[/green]")


@app.command()
def presets():
    """List the available configuration presets."""
    from slitwave.pipeline.data import PRESETS

    table = Table(title="Presets")
    table.add_column("Name")
    table.add_column("Wavelength rule")
    table.add_column("Color")
    table.add_column("Dispatch")
    table.add_column("Screen")
    table.add_column("Frames")
    for name, cfg in PRESETS.items():
        table.add_row(
            name,
            cfg.wavelength_rule.value,
            cfg.color_mode.value,
            "parallel" if cfg.parallel else "sequential",
            f"{cfg.width}x{cfg.height}",
            str(cfg.num_frames),
        )
    console.print(table)


@app.command()
def profile(
    index: Annotated[int, typer.Argument(help="Frame index")],
    preset: Annotated[Optional[str], typer.Option(help="Configuration preset")] = None,
    rows: Annotated[int, typer.Option(help="Number of rows to sample")] = 16,
):
    """Show the row intensity profile of a single frame."""
    import numpy as np

    from slitwave.models import frame_wavelengths, intensity_profile, intensity_to_channel

    try:
        cfg = _load(preset, None, None, None, None, None).simulation_config()
        w = frame_wavelengths(cfg.wavelength_rule, index, cfg.freq_multi, cfg.freq_div)
    except (SlitwaveError, ValueError) as e:
        _fail(e)

    intensity = intensity_profile(cfg.height, cfg.slit1_y, cfg.slit2_y, w, cfg.distance)
    channel = intensity_to_channel(intensity)

    console.print(Panel.fit(
        f"[bold]Frame {index}[/bold]\n"
        f"Wavelength: {w[0]:.4f}\n"
        f"Slits: {cfg.slit1_y}, {cfg.slit2_y} | Distance: {cfg.distance}\n"
        f"Mean intensity: {float(np.mean(intensity)):.4f} | Peak: {float(np.max(intensity)):.4f}"
    ))

    table = Table(title="Row profile")
    table.add_column("y")
    table.add_column("Intensity")
    table.add_column("Channel")
    for y in np.linspace(0, cfg.height - 1, max(1, rows)).astype(int):
        table.add_row(str(y), f"{intensity[y]:.4f}", str(int(channel[y])))
    console.print(table)


@app.command()
def version():
    """Show version information."""
    from slitwave import __version__
    console.print(f"slitwave v{__version__}")


if __name__ == "__main__":
    app()
