from __future__ import annotations
from typing import Optional
import typer
from .api import DiseaseClient
from .config import DashboardConfig, configure_logging
from .data import build_chart_data, map_frame, table_frame
from .errors import DataSourceError
from .models import STAT_KINDS, WORLDWIDE, MapView, check_kind, today, total
from .plots import bubble_map, choropleth, line_graph
from .utils import compact, pretty_print_stat, thousands

app = typer.Typer(add_completion=False)

def _setup(config: Optional[str]) -> DashboardConfig:
    try:
        cfg = DashboardConfig.load(config)
    except (OSError, ValueError) as e:
        typer.echo(f"Could not load config: {e}", err=True)
        raise typer.Exit(code=2)
    configure_logging(cfg.log_level)
    return cfg

def _kind(kind: str) -> str:
    try:
        return check_kind(kind)
    except ValueError as e:
        raise typer.BadParameter(str(e))

def _fail(e: DataSourceError) -> None:
    typer.echo(f"Data source error: {e}", err=True)
    raise typer.Exit(code=1)

@app.command()
def summary(country: str = typer.Option(WORLDWIDE, help="ISO code or 'worldwide'"), config: Optional[str] = None):
    cfg = _setup(config)
    client = DiseaseClient.from_config(cfg)
    try:
        stat = client.fetch_global() if country == WORLDWIDE else client.fetch_country(country)
    except DataSourceError as e:
        _fail(e)
    label = "Worldwide" if country == WORLDWIDE else stat.country
    typer.echo(label)
    for kind in STAT_KINDS:
        typer.echo(f"  {kind:<10} {compact(total(stat, kind)):>8}  {pretty_print_stat(today(stat, kind))} today")

@app.command()
def table(top: int = 20, output: Optional[str] = None, config: Optional[str] = None):
    cfg = _setup(config)
    try:
        stats = DiseaseClient.from_config(cfg).fetch_all_countries()
    except DataSourceError as e:
        _fail(e)
    df = table_frame(stats)
    if output:
        df.to_csv(output, index=False)
        typer.echo(f"Wrote country table -> {output}")
        return
    for row in df.head(top).itertuples(index=False):
        typer.echo(f"{row.country:<32} {thousands(row.cases):>15}")

@app.command("map")
def map_cmd(out_html: str, kind: str = "cases", style: str = "bubble", config: Optional[str] = None):
    cfg = _setup(config)
    kind = _kind(kind)
    if style not in ("bubble", "choropleth"):
        raise typer.BadParameter("style must be 'bubble' or 'choropleth'")
    try:
        stats = DiseaseClient.from_config(cfg).fetch_all_countries()
    except DataSourceError as e:
        _fail(e)
    df = map_frame(stats, kind)
    if style == "bubble":
        fig = bubble_map(df, kind, MapView(cfg.world_center, cfg.world_zoom), world_zoom=cfg.world_zoom)
    else:
        fig = choropleth(df, kind)
    fig.write_html(out_html)
    typer.echo(f"Wrote map -> {out_html}")

@app.command("trend")
def trend(out_html: str, kind: str = "cases", days: Optional[int] = None, config: Optional[str] = None):
    cfg = _setup(config)
    kind = _kind(kind)
    try:
        history = DiseaseClient.from_config(cfg).fetch_history(days or cfg.history_days)
    except DataSourceError as e:
        _fail(e)
    fig = line_graph(build_chart_data(history, kind), kind)
    fig.write_html(out_html)
    typer.echo(f"Wrote trend -> {out_html}")

if __name__ == "__main__":
    app()
