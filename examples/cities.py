#!/usr/bin/env python3
"""
Largest Cities Example

Streams a table of the world's largest cities to the terminal.

Setup:
    uv sync --extra examples

    # Run this example
    uv run python examples/cities.py --repeat 20 --threshold 10
    uv run python examples/cities.py --no-borders --unicode
"""

import sys
from dataclasses import dataclass

import click

from tablestream import Column, TableConfig, TableStream


@dataclass
class City:
    name: str
    country: str
    population: int


LARGEST_CITIES = [
    City("Shanghai", "China", 24_150_000),
    City("Beijing", "China", 21_700_000),
    City("Lagos", "Nigeria", 21_320_000),
    City("Tianjin", "China", 15_470_000),
    City("Karachi", "Pakistan", 14_920_000),
    City("Istanbul", "Turkey", 14_800_000),
    City("Dhaka", "Bangladesh", 14_540_000),
    City("Chengdu", "China", 14_430_000),
    City("Tokyo", "Japan", 13_620_000),
    City("Guangzhou", "China", 13_500_000),
    City("Mumbai", "India", 12_440_000),
    City("Moscow", "Russia", 12_380_000),
    City("Bengaluru", "India", 12_340_000),
    City("Zhoukou", "China", 12_070_000),
    City("São Paulo", "Brazil", 12_040_000),
    City("Kinshasa", "Democratic Republic of the Congo", 11_860_000),
    City("Nanyang", "China", 11_680_000),
    City("Baoding", "China", 11_190_000),
    City("Delhi", "India", 11_030_000),
    City("Lima", "Peru", 10_850_000),
]

# Wide glyphs are counted as one column each, so these rows misalign.
UNICODE_CITIES = [
    City("上海市", "中国", 24_150_000),
    City("İstanbul", "Türkiye Cumhuriyeti", 14_800_000),
    City("東京都", "日本", 13_620_000),
    City("Москва", "Российская Федерация", 12_380_000),
    City("Kinshasa", "République démocratique du Congo", 11_860_000),
    City("Lima", "República del Perú", 10_850_000),
]


@click.command()
@click.option("--borders/--no-borders", default=True, help="Draw outer borders")
@click.option("--no-padding", is_flag=True, help="Remove spaces around dividers")
@click.option("--repeat", default=1, type=int, help="Repeat the data to simulate a long stream")
@click.option("--threshold", default=100, type=int, help="Rows buffered before widths freeze")
@click.option("--max-width", type=int, help="Table width (default: terminal width)")
@click.option("--format-pop", is_flag=True, help="Show population in scientific notation")
@click.option("--unicode", is_flag=True, help="Use native city names")
@click.option("--title", help="Title printed above the header")
@click.option("--total", is_flag=True, help="Show total population in a footer")
def main(
    borders: bool,
    no_padding: bool,
    repeat: int,
    threshold: int,
    max_width: int | None,
    format_pop: bool,
    unicode: bool,
    title: str | None,
    total: bool,
) -> None:
    """Stream the world's largest cities as a table."""
    columns = [
        Column.attr("name", header="City"),
        Column.attr("country", header="Country"),
        Column.attr("population", fmt="{:.2e}" if format_pop else "{:,}", header="Population"),
    ]
    config = TableConfig(
        threshold=threshold,
        max_width=max_width,
        borders=borders,
        padding=not no_padding,
    )
    cities = UNICODE_CITIES if unicode else LARGEST_CITIES

    table = TableStream(sys.stdout, columns, config, title=title)
    for _ in range(repeat):
        table.push_many(cities)

    footer = None
    if total:
        footer = f"Total Population: {sum(c.population for c in cities) * repeat:,}"
    table.finish(footer=footer)


if __name__ == "__main__":
    main()
