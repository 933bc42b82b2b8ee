"""Typer CLI for panel cut list optimization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from panelcut.application import CutListOutput, OptimizeCutListCommand
from panelcut.application.config import (
    ConfigError,
    OutputFormat,
    config_to_cabinets,
    config_to_material,
    load_config,
)
from panelcut.cli.commands import validate_command
from panelcut.domain import (
    AssemblyType,
    Cabinet,
    DoorStyle,
    InvalidDimension,
    Material,
    MaterialType,
    generate_panels,
    project_preview,
    validate_cabinet,
)
from panelcut.infrastructure import (
    CutDiagramRenderer,
    CutListFormatter,
    JsonExporter,
    LayoutSummaryFormatter,
)

app = typer.Typer(
    name="panelcut",
    help="Derive cabinet panels and pack them onto stock sheets.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Panel cut optimizer."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Shared cabinet options
HeightOpt = Annotated[float, typer.Option("--height", "-h", help="Cabinet height in mm")]
WidthOpt = Annotated[float, typer.Option("--width", "-w", help="Cabinet width in mm")]
DepthOpt = Annotated[float, typer.Option("--depth", "-d", help="Cabinet depth in mm")]
DivisionsOpt = Annotated[int, typer.Option("--divisions", help="Number of internal shelves")]
QuantityOpt = Annotated[int, typer.Option("--quantity", "-q", help="Number of identical cabinets")]
DoorStyleOpt = Annotated[DoorStyle, typer.Option("--door-style", help="Door style")]
AssemblyOpt = Annotated[AssemblyType, typer.Option("--assembly", help="Assembly type")]
DrawerSpacingOpt = Annotated[float, typer.Option("--drawer-spacing", help="Drawer spacing in mm")]


def _exit_with_errors(errors: list[str]) -> None:
    for error in errors:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


def _render(result: CutListOutput, output_format: OutputFormat) -> str:
    """Render an optimization result in the requested format."""
    if output_format == OutputFormat.JSON:
        return JsonExporter().export(result)

    if output_format == OutputFormat.SVG:
        renderer = CutDiagramRenderer()
        return "\n\n".join(
            renderer.render_svg(entry.layout, title=f"Cabinet {entry.cabinet_number}")
            for entry in result.cut_lists
        )

    cutlist_formatter = CutListFormatter()
    summary_formatter = LayoutSummaryFormatter()
    blocks: list[str] = []
    for entry in result.cut_lists:
        blocks.append(f"CABINET {entry.cabinet_number} (x{entry.cabinet.quantity})")
        blocks.append(cutlist_formatter.format(entry.layout.panels))
        blocks.append("")
        blocks.append(summary_formatter.format(entry.layout))
        blocks.append("")

    if output_format == OutputFormat.ALL:
        renderer = CutDiagramRenderer()
        blocks.append("=" * 40)
        for entry in result.cut_lists:
            blocks.append(f"Cabinet {entry.cabinet_number}")
            blocks.append(renderer.render_waste_summary(entry.layout))
        blocks.append("")
        blocks.append("Use --format svg for cut diagrams")

    return "\n".join(blocks).rstrip()


def _write_or_echo(text: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(text)
        return
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Wrote {output_file}")


@app.command()
def panels(
    height: HeightOpt = 720.0,
    width: WidthOpt = 600.0,
    depth: DepthOpt = 580.0,
    divisions: DivisionsOpt = 1,
    quantity: QuantityOpt = 1,
    cabinet_number: Annotated[
        int, typer.Option("--cabinet-number", help="Number used in panel ids")
    ] = 1,
) -> None:
    """Display the panels derived from one cabinet."""
    cabinet = Cabinet(
        height=height,
        width=width,
        depth=depth,
        divisions=divisions,
        quantity=quantity,
    )
    try:
        validate_cabinet(cabinet)
    except InvalidDimension as e:
        _exit_with_errors([str(e)])

    typer.echo(CutListFormatter().format(generate_panels(cabinet, cabinet_number)))


@app.command()
def optimize(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON project configuration"),
    ] = None,
    height: HeightOpt = 720.0,
    width: WidthOpt = 600.0,
    depth: DepthOpt = 580.0,
    divisions: DivisionsOpt = 1,
    quantity: QuantityOpt = 1,
    door_style: DoorStyleOpt = DoorStyle.FULL_OVERLAY,
    assembly: AssemblyOpt = AssemblyType.FRAMELESS,
    drawer_spacing: DrawerSpacingOpt = 100.0,
    material_type: Annotated[
        MaterialType, typer.Option("--material", "-m", help="Sheet material")
    ] = MaterialType.MDF,
    thickness: Annotated[
        float, typer.Option("--thickness", "-t", help="Sheet thickness in mm")
    ] = 18.0,
    sheet_width: Annotated[
        float, typer.Option("--sheet-width", help="Sheet width in mm")
    ] = 2440.0,
    sheet_height: Annotated[
        float, typer.Option("--sheet-height", help="Sheet height in mm")
    ] = 1220.0,
    kerf: Annotated[float, typer.Option("--kerf", help="Blade kerf in mm")] = 3.0,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: all, text, json, svg"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to this file"),
    ] = None,
) -> None:
    """Generate panels and pack them onto the stock sheet.

    With --config every cabinet in the project file is processed and the
    cabinet and sheet options are ignored.
    """
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Configuration error: {e}", err=True)
            raise typer.Exit(code=1)
        material = config_to_material(config)
        cabinets = config_to_cabinets(config)
        fmt = output_format or config.output.format
        if output_file is None and config.output.output_dir:
            extension = {OutputFormat.JSON: "json", OutputFormat.SVG: "svg"}.get(fmt, "txt")
            output_file = Path(config.output.output_dir) / f"{config.name}.{extension}"
    else:
        material = Material(
            type=material_type,
            thickness=thickness,
            width=sheet_width,
            height=sheet_height,
            kerf=kerf,
        )
        cabinets = [
            Cabinet(
                height=height,
                width=width,
                depth=depth,
                divisions=divisions,
                drawer_spacing=drawer_spacing,
                assembly_type=assembly,
                door_style=door_style,
                quantity=quantity,
            )
        ]
        fmt = output_format or OutputFormat.ALL

    result = OptimizeCutListCommand().execute(material, cabinets)
    if not result.is_valid:
        _exit_with_errors(result.errors)

    _write_or_echo(_render(result, fmt), output_file)


@app.command()
def preview(
    height: HeightOpt = 720.0,
    width: WidthOpt = 600.0,
    depth: DepthOpt = 580.0,
    divisions: DivisionsOpt = 1,
    door_style: DoorStyleOpt = DoorStyle.FULL_OVERLAY,
    assembly: AssemblyOpt = AssemblyType.FRAMELESS,
    scale: Annotated[float, typer.Option("--scale", help="Preview units per mm")] = 0.25,
) -> None:
    """Show front-elevation preview geometry for a cabinet."""
    cabinet = Cabinet(
        height=height,
        width=width,
        depth=depth,
        divisions=divisions,
        assembly_type=assembly,
        door_style=door_style,
    )
    try:
        validate_cabinet(cabinet)
    except InvalidDimension as e:
        _exit_with_errors([str(e)])

    view = project_preview(cabinet, scale=scale)
    typer.echo("CABINET PREVIEW")
    typer.echo("=" * 40)
    typer.echo(f"Box:        {view.box.width:g} x {view.box.height:g}")
    typer.echo(
        f"Door:       {view.door.width:g} x {view.door.height:g} "
        f"at ({view.door.x:g}, {view.door.y:g})"
    )
    if view.face_frame is not None:
        typer.echo(f"Face frame: {view.face_frame.width:g} x {view.face_frame.height:g}")
    if view.division_lines:
        lines = ", ".join(f"{y:g}" for y in view.division_lines)
        typer.echo(f"Divisions:  {lines}")
    typer.echo(f"View box:   {view.view_box[0]:g} x {view.view_box[1]:g}")


if __name__ == "__main__":
    app()
