"""Integrations subpackage for json-equivalence.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_json_equivalent`` fixture

The plugin module is loaded by pytest itself and is not re-exported here,
so importing the package never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
