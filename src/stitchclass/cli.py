from typing import List, Optional

import typer

from .config import Settings
from .logging import get_logger
from .regions import ClassifiedRegion, Interval, InvalidLabelError, merge_overlapping_classes

app = typer.Typer(help="stitchclass – overlap tests for labelled tile regions", no_args_is_help=True)

REGION_HELP = "Region as comma-separated start:end axes, optionally prefixed by labels, e.g. 1+2=0:10,0:10"


def parse_region(text: str, settings: Optional[Settings] = None) -> ClassifiedRegion:
    """
    Parse a region from its command-line form.

    ``"0:10,5:15"`` is a 2-D region without labels and ``"3+4=0:10"`` a 1-D
    region labelled 3 and 4.
    """
    settings = settings or Settings()

    labels: List[int] = []
    body = text.strip()
    if "=" in body:
        label_part, body = body.split("=", 1)
        try:
            labels = [int(label) for label in label_part.split(settings.label_separator)]
        except ValueError:
            raise typer.BadParameter(f"invalid labels in {text!r}") from None

    intervals = []
    for axis in body.split(settings.axis_separator) if body else []:
        bounds = axis.split(settings.bound_separator)
        if len(bounds) != 2:
            raise typer.BadParameter(f"axis {axis!r} must look like start{settings.bound_separator}end")
        try:
            intervals.append(Interval(float(bounds[0]), float(bounds[1])))
        except ValueError as exc:
            raise typer.BadParameter(f"invalid axis {axis!r}: {exc}") from None

    region = ClassifiedRegion(intervals)
    for label in labels:
        try:
            region.add_class(label)
        except InvalidLabelError as exc:
            raise typer.BadParameter(str(exc)) from None
    return region


@app.command(context_settings={"ignore_unknown_options": True})
def intersect(
    first: str = typer.Argument(..., help=REGION_HELP),
    second: str = typer.Argument(..., help=REGION_HELP),
    ignore_overlap: bool = typer.Option(False, "--ignore-overlap", help="Treat intervals as exclusive partitions"),
) -> None:
    """
    Check whether two regions intersect.

    Prints 'intersect' or 'disjoint'; the exit code is 1 when the regions are disjoint.
    """
    logger = get_logger(__name__)
    settings = Settings(ignore_overlap=ignore_overlap)

    a = parse_region(first, settings)
    b = parse_region(second, settings)
    logger.debug(f"Comparing {a} with {b}")

    if a.intersects(b, settings.ignore_overlap):
        typer.echo("intersect")
        return
    typer.echo("disjoint")
    raise typer.Exit(code=1)


@app.command(context_settings={"ignore_unknown_options": True})
def group(
    tiles: List[str] = typer.Argument(..., help=REGION_HELP),
    ignore_overlap: bool = typer.Option(False, "--ignore-overlap", help="Treat intervals as exclusive partitions"),
) -> None:
    """
    Group overlapping tiles and merge their labels.

    Tiles given without labels are labelled by their position on the command line.
    """
    logger = get_logger(__name__)
    settings = Settings(ignore_overlap=ignore_overlap)

    regions = []
    for index, text in enumerate(tiles):
        region = parse_region(text, settings)
        if not region.classes:
            region.add_class(index)
        regions.append(region)

    groups = merge_overlapping_classes(regions, settings.ignore_overlap)
    logger.info(f"Merged labels across {len(regions)} tiles")

    for item in groups:
        members = ",".join(str(index) for index in item.indices)
        labels = ",".join(str(label) for label in item.classes)
        typer.echo(f"{item.group_id}: tiles={members} classes={labels}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
