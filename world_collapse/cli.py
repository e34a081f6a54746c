#!filepath: world_collapse/cli.py
from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from world_collapse import __version__, logs
from world_collapse.config.app_config import AppConfig
from world_collapse.dice.random_dice import RandomDice
from world_collapse.observability.instrumentation import Instrumentation, NoOpInstrumentation
from world_collapse.uwp.codec import parse_profile
from world_collapse.uwp.world import FrontierStatus, WorldRecord
from world_collapse.utils.errors import WorldCollapseError
from world_collapse.workflows.hard_times import run_hard_times
from world_collapse.workflows.virus import run_virus

app = typer.Typer(help="World Collapse CLI (Hard Times / Virus UWP degradation)")


def _load(config: Optional[str], seed: Optional[int]):
    try:
        cfg = AppConfig.load(path=config)
    except (FileNotFoundError, ValueError) as err:
        # pydantic ValidationError is a ValueError
        _fail(err)
    logs.configure(cfg.log)
    dice = RandomDice(seed if seed is not None else cfg.dice.seed)
    return cfg, dice


def _world_table(title: str, world: WorldRecord) -> Table:
    table = Table(title=title)
    table.add_column("field")
    table.add_column("value", justify="right")

    for name in (
        "starport", "size", "atmosphere", "hydrographics", "population",
        "government", "law", "techlevel", "population_exponent",
        "naval_base", "scout_base", "way_station", "depot",
    ):
        value = getattr(world, name)
        table.add_row(name, str(getattr(value, "value", value)))
    return table


def _instrumentation(report: bool):
    return Instrumentation(enabled=True) if report else NoOpInstrumentation()


def _print_report(inst, label: str):
    report = inst.collapse_report(label)
    if report is not None:
        print(report.to_table())


def _fail(err: Exception):
    print(f"[red]{escape(str(err))}[/red]")
    raise typer.Exit(code=1)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def decode(uwp: str):
    """
    显示 UWP 各字段的整数值
    """
    try:
        world = parse_profile(uwp)
    except WorldCollapseError as err:
        _fail(err)
    print(_world_table(world.uwp, world))


@app.command()
def virus(
        uwp: str,
        pop_exponent: int = typer.Option(1, help="population multiplier (1-9)"),
        naval_base: bool = typer.Option(False, "--naval-base"),
        scout_base: bool = typer.Option(False, "--scout-base"),
        way_station: bool = typer.Option(False, "--way-station"),
        depot: bool = typer.Option(False, "--depot"),
        seed: Optional[int] = typer.Option(None, help="dice seed"),
        config: Optional[str] = typer.Option(None, help="YAML config path"),
        report: bool = typer.Option(False, "--report", help="print per-stage outcome and timing"),
):
    """
    Virus collapse（TNE pp190-191）
    """
    cfg, dice = _load(config, seed)
    inst = _instrumentation(report)
    try:
        world = parse_profile(
            uwp,
            strict=cfg.codec.strict_decode,
            population_exponent=pop_exponent,
            naval_base=naval_base,
            scout_base=scout_base,
            way_station=way_station,
            depot=depot,
        )
        result = run_virus(world, dice, cfg=cfg.virus, inst=inst)
    except WorldCollapseError as err:
        _fail(err)

    print(f"[blue]{world.uwp}[/blue] -> [green]{result.world.uwp}[/green]")
    print(f"MSP={result.msp} TL decline={result.tldr} collapsed={result.collapsed}")
    print(_world_table("after Virus", result.world))
    _print_report(inst, f"virus {world.uwp}")


@app.command(name="hard-times")
def hard_times(
        uwp: str,
        war_zone: int = typer.Option(0, help="0 none, 1 war, 2 intense, 3 black war"),
        frontier: FrontierStatus = typer.Option(FrontierStatus.SAFE),
        isolated: bool = typer.Option(False, "--isolated"),
        pop_exponent: int = typer.Option(1, help="population multiplier (1-9)"),
        naval_base: bool = typer.Option(False, "--naval-base"),
        scout_base: bool = typer.Option(False, "--scout-base"),
        seed: Optional[int] = typer.Option(None, help="dice seed"),
        config: Optional[str] = typer.Option(None, help="YAML config path"),
        report: bool = typer.Option(False, "--report", help="print per-stage outcome and timing"),
):
    """
    Hard Times Stage 1 + Stage 2
    """
    cfg, dice = _load(config, seed)
    inst = _instrumentation(report)
    try:
        world = parse_profile(
            uwp,
            strict=cfg.codec.strict_decode,
            population_exponent=pop_exponent,
            war_zone_level=war_zone,
            frontier_status=frontier,
            is_isolated_world=isolated,
            naval_base=naval_base,
            scout_base=scout_base,
        )
        result = run_hard_times(world, dice, cfg=cfg.hard_times, inst=inst)
    except WorldCollapseError as err:
        _fail(err)

    print(f"[blue]{world.uwp}[/blue] -> [green]{result.world.uwp}[/green]")
    print(
        f"shock roll={result.shock_roll} stage3 TL DM={result.stage3_tl_dm} "
        f"attrition roll={result.attrition_roll} degrees={result.attrition_degrees}"
    )
    print(_world_table("after Hard Times", result.world))
    _print_report(inst, f"hard_times {world.uwp}")


if __name__ == "__main__":
    app()

# python -m world_collapse.cli virus A566999-E --seed 7
