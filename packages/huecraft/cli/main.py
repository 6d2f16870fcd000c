"""Command-line interface for huecraft."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
import re
import sys
from typing import Any

from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from huecraft.core.color.hue import HuePath
from huecraft.core.color.models import OklchColor
from huecraft.core.companions import (
    AccentIntensity,
    CompanionPalette,
    find_vibe_accent,
    find_vibe_backgrounds,
    generate_vibe_companions,
    get_vibe_preset,
    list_vibe_presets,
)
from huecraft.core.config.loader import configure_logging, load_app_config
from huecraft.core.config.models import AppConfig
from huecraft.core.formats.css import GradientType, format_oklch, stops_to_css
from huecraft.core.gradient import (
    AUTO,
    GradientStyle,
    generate_vibe_gradient,
    get_gradient_styles,
)
from huecraft.core.mood import analyze_color_mood
from huecraft.core.utils.json import dumps
from huecraft.core.utils.random import make_rng

console = Console()
logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)"
_COLOR_PATTERN = re.compile(
    rf"^\s*(?:oklch\(\s*)?({_NUMBER})(%?)\s*[,\s]\s*({_NUMBER})\s*[,\s]\s*({_NUMBER})(?:deg)?\s*\)?\s*$",
    re.IGNORECASE,
)


def parse_color(text: str) -> OklchColor:
    """Parse ``oklch(L C H)``, ``L,C,H`` or ``L C H`` into a color.

    Lightness may be given as a percentage.

    Raises:
        ValueError: If the text is not a color

    Example:
        >>> parse_color("oklch(62% 0.12 250)")
        OklchColor(mode='oklch', l=0.62, c=0.12, h=250.0)
    """
    match = _COLOR_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Cannot parse color '{text}': expected 'oklch(L C H)', 'L,C,H' or 'L C H'")

    lightness = float(match.group(1))
    if match.group(2):
        lightness /= 100
    return OklchColor(l=lightness, c=float(match.group(3)), h=float(match.group(4)))


def _emit_json(payload: BaseModel | dict[str, Any] | list[Any]) -> None:
    sys.stdout.write(dumps(payload) + "\n")


def _palette_table(title: str, result: CompanionPalette) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Color")
    table.add_column("Role")
    table.add_column("Relationship")
    for i, entry in enumerate(result.palette):
        table.add_row(str(i), format_oklch(entry.color), entry.role.value, entry.description)
    return table


def _print_palette(title: str, result: CompanionPalette) -> None:
    console.print(_palette_table(title, result))
    console.print(f"[bold]Mood:[/bold] {result.mood.value} - {result.mood_description}")
    for tip in result.tips:
        console.print(f"  • {tip}")


def cmd_analyze(args: argparse.Namespace, config: AppConfig) -> int:
    """Classify a color's energy, depth, temperature and mood."""
    mood = analyze_color_mood(parse_color(args.color))
    if args.json:
        _emit_json(mood)
        return 0

    table = Table(title="Color mood")
    table.add_column("Property")
    table.add_column("Value")
    table.add_row("Energy", mood.energy.value)
    table.add_row("Depth", mood.depth.value)
    table.add_row("Temperature", mood.temperature.value)
    table.add_row("Mood", mood.mood.value)
    table.add_row("Hue spread", mood.strategy.hue_spread.value)
    table.add_row("Temperature bias", mood.strategy.temperature_bias.value)
    console.print(table)
    console.print(mood.strategy.description)
    return 0


def cmd_gradient(args: argparse.Namespace, config: AppConfig) -> int:
    """Generate a mood-matched gradient and print it as CSS."""
    defaults = config.gradient
    result = generate_vibe_gradient(
        parse_color(args.color),
        style=args.style or defaults.style,
        stops=args.stops if args.stops is not None else defaults.stops,
        hue_path=args.hue_path or defaults.hue_path,
    )
    angle = args.angle if args.angle is not None else defaults.angle
    gradient_type = args.type or defaults.gradient_type
    css = stops_to_css(result.stops, angle, gradient_type)

    if args.json:
        _emit_json({**result.model_dump(mode="json"), "css": css})
        return 0

    console.print(f"[bold]Style:[/bold] {result.style.value} ({result.hue_path.value} hue path)")
    console.print(f"[bold]Mood:[/bold] {result.mood.value}")
    console.print(result.description)
    console.print(css, soft_wrap=True, highlight=False)
    return 0


def cmd_companions(args: argparse.Namespace, config: AppConfig) -> int:
    """Generate vibe-matched companion colors."""
    defaults = config.companions
    seed = args.seed if args.seed is not None else defaults.seed
    result = generate_vibe_companions(
        parse_color(args.color),
        count=args.count if args.count is not None else defaults.count,
        purpose=defaults.purpose,
        include_input=defaults.include_input and not args.no_input,
        rng=make_rng(seed),
    )
    if args.json:
        _emit_json(result)
        return 0

    _print_palette("Companions", result)
    return 0


def cmd_accent(args: argparse.Namespace, config: AppConfig) -> int:
    """Find an accent color."""
    result = find_vibe_accent(
        parse_color(args.color),
        intensity=args.intensity,
        rng=make_rng(args.seed if args.seed is not None else config.companions.seed),
    )
    if args.json:
        _emit_json(result)
        return 0

    console.print(f"[bold]Accent:[/bold] {format_oklch(result.accent)}", highlight=False)
    for alternative in result.alternatives:
        console.print(f"  alternative: {format_oklch(alternative)}", highlight=False)
    console.print(result.explanation)
    return 0


def cmd_backgrounds(args: argparse.Namespace, config: AppConfig) -> int:
    """Suggest background colors."""
    result = find_vibe_backgrounds(
        parse_color(args.color),
        rng=make_rng(args.seed if args.seed is not None else config.companions.seed),
    )
    if args.json:
        _emit_json(result)
        return 0

    table = Table(title="Backgrounds")
    table.add_column("Label")
    table.add_column("Color")
    table.add_column("Description")
    for option in result.backgrounds:
        table.add_row(option.label, format_oklch(option.color), option.description)
    console.print(table)
    console.print(result.recommendation)
    return 0


def cmd_preset(args: argparse.Namespace, config: AppConfig) -> int:
    """Generate a palette steered toward a named preset mood."""
    result = get_vibe_preset(
        args.name,
        parse_color(args.color),
        rng=make_rng(args.seed if args.seed is not None else config.companions.seed),
    )
    if args.json:
        _emit_json(result)
        return 0

    _print_palette(f"Preset: {args.name}", result)
    return 0


def cmd_styles(args: argparse.Namespace, config: AppConfig) -> int:
    """List gradient styles and presets."""
    styles = get_gradient_styles()
    presets = list_vibe_presets()
    if args.json:
        _emit_json({"styles": [s.model_dump(mode="json") for s in styles], "presets": presets})
        return 0

    table = Table(title="Gradient styles")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Description")
    for info in styles:
        name = f"{info.name} ★" if info.is_signature else info.name
        table.add_row(info.id.value, name, info.description)
    console.print(table)
    console.print(f"[bold]Presets:[/bold] {', '.join(presets)}")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="huecraft",
        description="huecraft - mood-aware OKLCH gradients and companion palettes",
    )
    p.add_argument("--config", default=None, help="Path to app config (JSON or YAML)")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    p.add_argument("--json", action="store_true", help="Print results as JSON")
    sub = p.add_subparsers(dest="cmd", required=True)

    color_help = "Color as 'oklch(L C H)', 'L,C,H' or 'L C H'"

    analyze = sub.add_parser("analyze", help="Classify a color's mood")
    analyze.add_argument("color", help=color_help)
    analyze.set_defaults(handler=cmd_analyze)

    gradient = sub.add_parser("gradient", help="Generate a vibe gradient")
    gradient.add_argument("color", help=color_help)
    gradient.add_argument(
        "--style",
        default=None,
        choices=[AUTO, *(s.value for s in GradientStyle)],
        help="Gradient style (default: auto from mood)",
    )
    gradient.add_argument("--stops", type=int, default=None, help="Number of key stops")
    gradient.add_argument(
        "--hue-path",
        default=None,
        choices=[AUTO, *(h.value for h in HuePath)],
        help="Hue interpolation path (default: auto from style)",
    )
    gradient.add_argument("--angle", type=float, default=None, help="Angle in degrees")
    gradient.add_argument(
        "--type",
        default=None,
        choices=[t.value for t in GradientType],
        help="CSS gradient type",
    )
    gradient.set_defaults(handler=cmd_gradient)

    companions = sub.add_parser("companions", help="Generate companion colors")
    companions.add_argument("color", help=color_help)
    companions.add_argument("--count", type=int, default=None, help="Palette size")
    companions.add_argument(
        "--no-input", action="store_true", help="Leave the input color out of the palette"
    )
    companions.add_argument("--seed", type=int, default=None, help="Seed for repeatable output")
    companions.set_defaults(handler=cmd_companions)

    accent = sub.add_parser("accent", help="Find an accent color")
    accent.add_argument("color", help=color_help)
    accent.add_argument(
        "--intensity",
        default=AccentIntensity.BALANCED.value,
        choices=[i.value for i in AccentIntensity],
    )
    accent.add_argument("--seed", type=int, default=None, help="Seed for repeatable output")
    accent.set_defaults(handler=cmd_accent)

    backgrounds = sub.add_parser("backgrounds", help="Suggest background colors")
    backgrounds.add_argument("color", help=color_help)
    backgrounds.add_argument("--seed", type=int, default=None, help="Seed for repeatable output")
    backgrounds.set_defaults(handler=cmd_backgrounds)

    preset = sub.add_parser("preset", help="Generate a palette from a named preset")
    preset.add_argument("name", choices=list_vibe_presets())
    preset.add_argument("color", help=color_help)
    preset.add_argument("--seed", type=int, default=None, help="Seed for repeatable output")
    preset.set_defaults(handler=cmd_preset)

    styles = sub.add_parser("styles", help="List gradient styles and presets")
    styles.set_defaults(handler=cmd_styles)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_app_config(args.config)
        if args.log_level:
            config = config.model_copy(
                update={"logging": config.logging.model_copy(update={"level": args.log_level})}
            )
        configure_logging(config)
        logger.debug(f"Running command '{args.cmd}'")
        return args.handler(args, config)
    except (ValueError, FileNotFoundError, ValidationError) as e:
        console.print(f"[red]ERROR:[/red] {escape(str(e))}", highlight=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
