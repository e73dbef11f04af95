"""Export the registry OpenAPI document.

Usage: ``python scripts/generate_openapi.py [destination]`` (defaults to
``docs/openapi.json``).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from share_registry.core.config import Settings
from share_registry.main import create_application


def main(argv: list[str]) -> None:
    destination = Path(argv[0]) if argv else ROOT / "docs" / "openapi.json"
    app = create_application(Settings(enable_metrics=False, enable_tracing=False))
    document = app.openapi()
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(json.dumps(document, indent=2, sort_keys=True), encoding="utf-8")
    print(f"OpenAPI document with {len(document.get('paths', {}))} paths written to {destination}")


if __name__ == "__main__":
    main(sys.argv[1:])
