from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from .config import DEFAULT_CFG_FILE, load_config
from .errors import TagcUserError
from .template import create_template_processor
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tagc",
        description="Template tag compiler",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="отладочный лог в stderr",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CFG_FILE),
        help=f"путь к конфигу (по умолчанию ./{DEFAULT_CFG_FILE})",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_render = sub.add_parser("render", help="Отрендерить шаблон в stdout")
    sp_render.add_argument("template", type=Path, help="файл шаблона")
    sp_render.add_argument(
        "--seed",
        type=int,
        help="seed для случайной генерации (перекрывает lorem.seed из конфига)",
    )

    sp_list = sub.add_parser("list", help="Списки сущностей")
    sp_list.add_argument("what", choices=["statements"], help="что вывести")

    return p


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(ns.config)
        processor = create_template_processor(config)

        if ns.cmd == "render":
            rng = random.Random(ns.seed) if ns.seed is not None else None
            sys.stdout.write(processor.render_file(ns.template, random=rng))
            return 0

        if ns.cmd == "list":
            for name in processor.registry.names():
                sys.stdout.write(name + "\n")
            return 0

        raise ValueError(f"Unknown command: {ns.cmd}")
    except TagcUserError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
