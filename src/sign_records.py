"""Logic for building the HTML signature strings shown in member headings."""

import re

from src.attribs import attribs_string, get_attribs
from src.link_registry import LinkRegistry
from src.symbol_record import DocParam, DocType, SymbolRecord
from src.type_string import type_strings

SIGNED_KINDS = {"function", "class", "interface"}
TYPED_KINDS = {"constant", "member"}
FUNCTION_CODE_RE = re.compile(r"[Ff]unction")


def needs_signature(record: SymbolRecord) -> bool:
    """Whether the record is callable and gets a parameter signature."""
    if record.kind in SIGNED_KINDS:
        return True
    if record.kind == "typedef" and record.type is not None:
        return any(t.lower() == "function" for t in record.type.names)
    if record.kind == "namespace" and record.code_type:
        return bool(FUNCTION_CODE_RE.search(record.code_type))
    return False


def sign_records(records: list[SymbolRecord], links: LinkRegistry) -> None:
    """Attach signature and attribute strings to every record."""
    for record in records:
        signed = needs_signature(record)
        typed = record.kind in TYPED_KINDS
        if signed:
            record.signature = _callable_signature(record, links)
        elif typed:
            types = type_strings(record.type, links)
            record.signature = (
                f'{record.signature}<span class="type-signature">'
                f"{': ' + types if types else ''}</span>"
            )
        if signed or typed:
            attribs = attribs_string(get_attribs(record))
            if attribs:
                record.attribs = f'<span class="type-signature">{attribs} </span>'


def _callable_signature(record: SymbolRecord, links: LinkRegistry) -> str:
    source = record.yields or record.returns
    attribs = attribs_string(list(dict.fromkeys(a for s in source for a in get_attribs(s))))
    throws = ", ".join(type_strings(e.type, links) for e in record.exceptions)
    returns = "|".join(
        type_strings(DocType(names=[n]), links) for s in source if s.type for n in s.type.names
    )

    if throws:
        suffix = f" &raquo; {throws}"
    elif returns:
        suffix = f" &rarr; {attribs}{{{returns}}}"
    else:
        suffix = ""
    return (
        f'<span class="signature">{record.signature}({_signature_params(record.params)})</span>'
        f'<span class="type-signature returns">{suffix}</span>'
    )


def _signature_params(params: list[DocParam]) -> str:
    """Render top-level parameter names, keeping the last of any duplicates."""
    last_index = {p.name: i for i, p in enumerate(params)}
    args = []
    for i, p in enumerate(params):
        if not p.name or "." in p.name or last_index[p.name] != i:
            continue
        name = f"&hellip;{p.name}" if p.variable else p.name
        attributes = []
        if p.optional:
            attributes.append("opt")
        if p.nullable is True:
            attributes.append("nullable")
        elif p.nullable is False:
            attributes.append("non-null")
        if attributes:
            name += f'<span class="signature-attributes">{", ".join(attributes)}</span>'
        args.append(name)
    return ", ".join(args)
