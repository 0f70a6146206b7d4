"""Rewrite the generated Vite config into its environment-aware form.

The rewrite works on text, not on a syntax tree. It targets the config that
``create vite`` generates, which has a known shape:

    import { defineConfig } from 'vite'
    ...
    export default defineConfig({
      plugins: [react()],
    })

and turns it into a ``defineConfig(({ mode }) => ...)`` factory that loads
the env for ``mode`` and proxies ``/api`` to ``VITE_API_URL``.
"""

from __future__ import annotations

import re
from pathlib import Path

from arlo.cli._errors import ConfigNotFoundError, ConfigTransformError

CONFIG_FILENAMES: tuple[str, ...] = ("vite.config.ts", "vite.config.js")

_IMPORT_RE = re.compile(r"""import\s+\{\s*defineConfig\s*\}\s+from\s+['"]vite['"]""")
_IMPORT_WITH_LOAD_ENV = "import { defineConfig, loadEnv } from 'vite'"

_FUNCTION_FORM_MARKER = "defineConfig(({ mode })"
_LEGACY_TARGET = "target: process.env.VITE_API_URL"
_ENV_TARGET = "target: env.VITE_API_URL"

_EXPORT_RE = re.compile(r"export\s+default\s+defineConfig\s*\(\s*\{")
_CLOSING = "})"

_SERVER_PROXY = """\
    server: {
      proxy: {
        '/api': {
          target: env.VITE_API_URL,
          changeOrigin: true,
          rewrite: (path) => path.replace(/^\\/api/, ''),
        },
      },
    },"""


def _ensure_load_env_import(content: str) -> str:
    return _IMPORT_RE.sub(_IMPORT_WITH_LOAD_ENV, content)


def _extract_body(content: str, start: int) -> str:
    end = content.rfind(_CLOSING)
    if end == -1 or end < start:
        raise ConfigTransformError("Could not find closing }) in config file")

    body = content[start:end].strip()
    if body.startswith("{"):
        body = body[1:]
    # only a closing brace left over from the object literal is dropped;
    # one that closes a nested object stays
    if body.endswith("}") and body.count("}") > body.count("{"):
        body = body[:-1]
    return body.strip()


def _function_config(body: str) -> str:
    if body and not body.endswith(","):
        body += ","
    body_block = f"    {body}\n" if body else ""
    return (
        "export default defineConfig(({ mode }) => {\n"
        "  const env = loadEnv(mode, process.cwd(), '')\n"
        "  return {\n"
        f"{body_block}"
        f"{_SERVER_PROXY}\n"
        "  }\n"
        "})\n"
    )


def transform(content: str) -> str:
    """
    Return ``content`` rewritten into the function-based config.

    Configs that are already function-based only get their proxy target
    pointed at the loaded env, so applying this twice changes nothing.

    Raises:
        ConfigTransformError: The export signature or its closing ``})`` is missing.
    """
    content = _ensure_load_env_import(content)

    if _FUNCTION_FORM_MARKER in content:
        return content.replace(_LEGACY_TARGET, _ENV_TARGET)

    match = _EXPORT_RE.search(content)
    if match is None:
        raise ConfigTransformError(
            "Could not find export default defineConfig({ in config file"
        )

    body = _extract_body(content, match.end())
    return content[: match.start()] + _function_config(body)


def find_config(directory: Path) -> Path:
    """Return the first Vite config present in ``directory``."""
    for name in CONFIG_FILENAMES:
        path = directory / name
        if path.exists():
            return path
    raise ConfigNotFoundError("No vite.config.js or vite.config.ts found")


def patch_vite_config(directory: Path = Path(".")) -> Path:
    """Rewrite the Vite config in ``directory`` in place and return its path."""
    path = find_config(directory)
    content = path.read_text(encoding="utf-8")
    path.write_text(transform(content), encoding="utf-8")
    return path
