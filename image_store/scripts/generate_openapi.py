# image_store/scripts/generate_openapi.py
from __future__ import annotations

import argparse
import json
from pathlib import Path

from image_store.api.openapi import build_openapi_document


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Gera o documento OpenAPI da API de imagens.")
    parser.add_argument(
        "-o",
        "--output",
        default="openapi.json",
        help="arquivo de saída (padrão: openapi.json)",
    )
    args = parser.parse_args(argv)

    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(
        json.dumps(build_openapi_document(), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    print(f"OpenAPI gerado em {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
