from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .buffered import BufferedFile
from .codegen import AliasGenerator, default_generator
from .model import AliasDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitOptions:
    indent: str = "    "
    # Worker threads used to render descriptors; output order never depends on it.
    jobs: int = 1


def render_aliases(
    descriptors: Sequence[AliasDescriptor],
    *,
    generator: AliasGenerator | None = None,
    opts: UnitOptions = UnitOptions(),
) -> str:
    """Render every descriptor, in input order, separated by a blank line."""
    gen = generator or default_generator(indent=opts.indent)
    if opts.jobs > 1 and len(descriptors) > 1:
        with ThreadPoolExecutor(max_workers=opts.jobs) as pool:
            parts = list(pool.map(gen.render, descriptors))
    else:
        parts = [gen.render(d) for d in descriptors]
    return "\n\n".join(parts)


def generate_aliases(
    descriptors: Sequence[AliasDescriptor],
    *,
    out_file: Path,
    generator: AliasGenerator | None = None,
    opts: UnitOptions = UnitOptions(),
) -> None:
    if not descriptors:
        raise ValueError("no alias descriptors to generate")
    text = render_aliases(descriptors, generator=generator, opts=opts)
    out_file = Path(out_file)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(text + "\n", encoding="utf-8")
    logger.info("wrote %d alias(es) to %s", len(descriptors), out_file)


def alias_script(
    path: str,
    descriptors: Sequence[AliasDescriptor],
    *,
    generator: AliasGenerator | None = None,
    opts: UnitOptions = UnitOptions(),
) -> BufferedFile:
    """Return the rendered aliases as an in-memory script file."""
    return BufferedFile(path, render_aliases(descriptors, generator=generator, opts=opts))
