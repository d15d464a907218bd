"""FX chain (``<FXCHAIN``) extraction."""
import logging
import re
from typing import List, Optional, Tuple

from .line_source import LineSource
from .models import Effect, FXType
from .scanning import closes_scope, indentation

logger = logging.getLogger(__name__)

FXCHAIN_OPEN = re.compile(r'\s*<FXCHAIN(?:\s|$)')
JS_ENTRY = re.compile(r'\s*<JS\s+(?:"([^"]*)"|(\S+))(?:\s+""|\s*$)')
PLUGIN_ENTRY = re.compile(r'\s*<(\w+)\s+"([^"]*)"\s+(?:"([^"]*)"|(\S+))')

# Longer labels first so that e.g. VST3i is never taken for VST
TYPE_PREFIXES = (
    ("VST3i", FXType.VST3I),
    ("VST3", FXType.VST3),
    ("VSTi", FXType.VSTI),
    ("VST", FXType.VST),
    ("AUi", FXType.AUI),
    ("AU", FXType.AU),
)

DATA_STRIP = str.maketrans("", "", "\t \r")


def resolve_fx_type(tag: str) -> FXType:
    """Classify a plugin type label by its most specific known prefix."""
    for prefix, fx_type in TYPE_PREFIXES:
        if tag.startswith(prefix):
            return fx_type
    return FXType.UNDEFINED


# REAPER writes "<VST "VST3i: Serum (Xfer)" ..." for every VST flavour; only
# an exact type label refines a generic VST or AU tag
LABEL_REFINEMENTS = {
    FXType.VST: {"VST3i": FXType.VST3I, "VST3": FXType.VST3, "VSTi": FXType.VSTI},
    FXType.AU: {"AUi": FXType.AUI},
}


def plugin_type(tag: str, name: str) -> FXType:
    """Resolve a plugin's type from its block tag, refined by its name label."""
    fx_type = resolve_fx_type(tag)
    if ":" in name:
        label = name.split(":", 1)[0].strip()
        return LABEL_REFINEMENTS.get(fx_type, {}).get(label, fx_type)
    return fx_type


def _extract_js(source: LineSource, index: int, chain_indent: str, name: str) -> Tuple[Effect, int]:
    data = ""
    if index < len(source) and not closes_scope(source[index], chain_indent):
        data = source[index].lstrip(" ")
        index += 1
    return Effect(name=name, type=FXType.JS, data=data), index


def _extract_plugin(source: LineSource, index: int, entry_indent: str,
                    tag: str, name: str, filepath: str) -> Tuple[Effect, int]:
    payload: List[str] = []
    while index < len(source):
        line = source[index]
        index += 1
        if closes_scope(line, entry_indent):
            break
        payload.append(line)

    return Effect(
        name=name,
        filepath=filepath,
        type=plugin_type(tag, name),
        data="".join(payload).translate(DATA_STRIP)
    ), index


def _first_group(match: re.Match, *groups: int) -> Optional[str]:
    for group in groups:
        if match.group(group) is not None:
            return match.group(group)
    return None


def extract_fx_chain(source: LineSource, start: int) -> Tuple[List[Effect], int]:
    """
    Extract the effects of one FX chain.

    Args:
        source: Project lines
        start: Index of the ``<FXCHAIN`` line

    Returns:
        Tuple of (effects in file order, index of the first line after the chain's footer)
    """
    chain_indent = indentation(source[start])
    effects: List[Effect] = []

    index = start + 1
    while index < len(source):
        line = source[index]
        index += 1
        if closes_scope(line, chain_indent):
            break

        match = JS_ENTRY.match(line)
        if match:
            effect, index = _extract_js(source, index, chain_indent, _first_group(match, 1, 2))
            effects.append(effect)
            continue

        match = PLUGIN_ENTRY.match(line)
        if match:
            effect, index = _extract_plugin(
                source, index, indentation(line),
                tag=match.group(1),
                name=match.group(2),
                filepath=_first_group(match, 3, 4)
            )
            effects.append(effect)

    logger.debug(f"FX chain with {len(effects)} effects")
    return effects, index
