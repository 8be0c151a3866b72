from __future__ import annotations
import argparse
import asyncio
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config import SEED_MODE, SEED_MODES, ID_STRATEGY
from .container import Container
from .domain.entities import ProductFilter, ArticleFilter

console = Console()

KINDS = ("products", "articles", "orders")


def _service(container: Container, kind: str):
    return {
        "products": container.product_service,
        "articles": container.article_service,
        "orders": container.order_service,
    }[kind]()


def _product_table(products) -> Table:
    table = Table(title=f"Products ({len(products)})")
    for column in ("ID", "Name", "Category", "Tags", "Price", "Stock"):
        table.add_column(column)
    for p in products:
        table.add_row(p.id, p.name, p.category, ", ".join(p.tags), f"{p.price:.2f}", str(p.inventory))
    return table


def _article_table(articles) -> Table:
    table = Table(title=f"Articles ({len(articles)})")
    for column in ("ID", "Title", "Category", "Tags", "Created"):
        table.add_column(column)
    for a in articles:
        table.add_row(a.id, a.title, a.category, ", ".join(a.tags), a.created_at.strftime("%Y-%m-%d"))
    return table


async def _run(args: argparse.Namespace, container: Container) -> int:
    if args.command == "products":
        products = await container.product_service().list(
            ProductFilter(
                category=args.category,
                tags=args.tag,
                search_term=args.search,
                min_price=args.min_price,
                max_price=args.max_price,
            ),
            newest_first=args.newest_first,
        )
        console.print(_product_table(products))
    elif args.command == "articles":
        articles = await container.article_service().list(
            ArticleFilter(category=args.category, tags=args.tag, search_term=args.search),
            newest_first=args.newest_first,
        )
        console.print(_article_table(articles))
    elif args.command in ("categories", "tags"):
        service = _service(container, args.kind)
        values = await (service.list_categories() if args.command == "categories" else service.list_tags())
        if not values:
            console.print(f"[yellow]No {args.command} found in {args.kind}.[/]")
        for value in values:
            console.print(value)
    elif args.command == "show":
        entity = await _service(container, args.kind).get_by_id(args.id)
        if entity is None:
            console.print(f"[red]{args.kind[:-1].capitalize()} {args.id} not found.[/]")
            return 1
        console.print(entity.to_dict())
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="catalog-store", description="Query the in-memory catalog store")
    ap.add_argument("--seed-mode", choices=SEED_MODES, default=SEED_MODE,
                    help="Seed the store with demo documents or start empty")
    sub = ap.add_subparsers(dest="command", required=True)

    for kind in ("products", "articles"):
        p = sub.add_parser(kind, help=f"List {kind}")
        p.add_argument("--category", help="Category (case-insensitive exact match)")
        p.add_argument("--tag", action="append", help="Tag to match; repeat for any-of")
        p.add_argument("--search", help="Free-text search term")
        p.add_argument("--newest-first", action="store_true", help="Sort by creation time, newest first")
        if kind == "products":
            p.add_argument("--min-price", type=float)
            p.add_argument("--max-price", type=float)

    for command in ("categories", "tags"):
        p = sub.add_parser(command, help=f"List distinct {command}")
        p.add_argument("kind", choices=KINDS)

    p = sub.add_parser("show", help="Show one document by id")
    p.add_argument("kind", choices=KINDS)
    p.add_argument("id")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    container = Container(seed_mode=args.seed_mode, id_strategy=ID_STRATEGY)
    return asyncio.run(_run(args, container))


if __name__ == "__main__":
    raise SystemExit(main())
