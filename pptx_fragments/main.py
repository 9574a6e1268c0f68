"""Entry-point that renders slide master descriptions into PresentationML fragments."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from pptx_fragments.model.fill_model import LAYOUT_16x9, LAYOUTS, Layout
from pptx_fragments.model.master_model import SlideMasterSpec
from pptx_fragments.parser.descriptor_parser import parse_masters
from pptx_fragments.renderer.master_builder import MasterBuilder
from pptx_fragments.utils.debug import DebugDumper
from pptx_fragments.utils.logger import get_logger

LOGGER = get_logger(__name__)


def resolve_layout(name: Optional[str]) -> Layout:
    """Look up a layout preset by name, defaulting to 16x9."""
    if name is None:
        return LAYOUT_16x9
    try:
        return LAYOUTS[name]
    except KeyError:
        raise ValueError(f"Unknown layout {name!r}; expected one of {', '.join(sorted(LAYOUTS))}") from None


def load_masters(masters_path: Path) -> List[SlideMasterSpec]:
    """Read a JSON masters document and parse it into descriptors."""
    document = json.loads(masters_path.read_text(encoding="utf-8"))
    return parse_masters(document)


def render_masters(masters: Sequence[SlideMasterSpec], layout: Layout) -> Dict[str, str]:
    """Return the ``p:cSld`` fragment of every master keyed by its title."""
    builder = MasterBuilder(layout)
    return {master.title: builder.build(master) for master in masters}


def fragment_filename(title: str) -> str:
    """Return a file name for a master title that stays inside the output directory."""
    name = Path(title.replace("\\", "/")).name
    if name in ("", ".", ".."):
        raise ValueError(f"Slide master title {title!r} cannot be used as a file name")
    return f"{name}.xml"


def write_fragments(fragments: Dict[str, str], output_dir: Path) -> List[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    names = set()
    for title, xml in fragments.items():
        filename = fragment_filename(title)
        if filename in names:
            raise ValueError(f"Slide master title {title!r} collides with another master file name")
        names.add(filename)
        target = output_dir / filename
        target.write_text(xml, encoding="utf-8")
        written.append(target)
    return written


def main(masters_file: str, output_dir: Optional[str] = None, layout_name: Optional[str] = None, debug: bool = False) -> List[Path]:
    """Run the description -> descriptors -> XML fragments pipeline."""
    masters_path = Path(masters_file).resolve()
    if not masters_path.exists():
        raise FileNotFoundError(f"Masters file not found: {masters_path}")

    layout = resolve_layout(layout_name)
    LOGGER.info("Rendering masters from %s on %s", masters_path.name, layout.name)
    masters = load_masters(masters_path)

    output_path = Path(output_dir).resolve() if output_dir else masters_path.with_suffix("")
    LOGGER.info("Writing %d fragments into %s", len(masters), output_path)
    written = write_fragments(render_masters(masters, layout), output_path)

    if debug:
        DebugDumper(output_path / "debug").dump(masters)
    return written


if __name__ == "__main__":  # pragma: no cover
    import argparse

    parser = argparse.ArgumentParser(description="Render slide master descriptions into PresentationML fragments")
    parser.add_argument("masters_file", help="Path to the JSON masters description")
    parser.add_argument("--output", help="Directory to write generated fragments")
    parser.add_argument("--layout", choices=sorted(LAYOUTS), help="Slide layout used for percentage sizes")
    parser.add_argument("--debug", action="store_true", help="Dump the parsed descriptors as JSON")

    args = parser.parse_args()
    main(args.masters_file, args.output, args.layout, debug=args.debug)
