"""Data models for representing extracted symbol records."""

from dataclasses import dataclass, field


@dataclass
class SourceMeta:
    """Source location of a documented symbol."""

    filename: str
    path: str = ""
    lineno: int | None = None
    source: str | None = None  # path joined with filename, set when links are declared
    shortpath: str | None = None  # common-prefix-shortened source path


@dataclass
class DocType:
    """A documented type expression, as an ordered list of alternative names."""

    names: list[str] = field(default_factory=list)


@dataclass
class DocParam:
    """A parameter, property, return value or exception tag."""

    name: str = ""
    type: DocType | None = None
    description: str = ""
    optional: bool = False
    nullable: bool | None = None
    variable: bool = False
    default_value: str | None = None


@dataclass
class TemplateParam:
    """A declared type parameter with its constraint types and default value."""

    type_names: list[str] = field(default_factory=list)
    default_value: str | None = None


@dataclass
class Example:
    """A code example with an optional caption."""

    code: str
    caption: str = ""


@dataclass
class SymbolRecord:
    """Represents one documented entity (class, function, member, etc.)."""

    longname: str
    name: str
    kind: str
    memberof: str | None = None
    scope: str | None = None
    alias: str | None = None
    augments: list[str] = field(default_factory=list)
    implements: list[str] = field(default_factory=list)
    overrides: list[str] = field(default_factory=list)
    templates: dict[str, TemplateParam] = field(default_factory=dict)

    description: str = ""
    summary: str = ""
    classdesc: str = ""
    examples: list[str] | list[Example] = field(default_factory=list)
    see: list[str] = field(default_factory=list)
    params: list[DocParam] = field(default_factory=list)
    properties: list[DocParam] = field(default_factory=list)
    type: DocType | None = None
    returns: list[DocParam] = field(default_factory=list)
    yields: list[DocParam] = field(default_factory=list)
    exceptions: list[DocParam] = field(default_factory=list)

    access: str | None = None
    virtual: bool = False
    readonly: bool = False
    nullable: bool | None = None
    async_: bool = False
    generator: bool = False
    undocumented: bool = False
    ignore: bool = False
    code_type: str | None = None  # meta.code.type, e.g. FunctionExpression
    meta: SourceMeta | None = None

    # Written by the build
    ancestors: list[str] = field(default_factory=list)
    link: str = ""
    id: str = ""
    attribs: str = ""
    signature: str = ""

    @property
    def blocks_inheritance(self) -> bool:
        """Whether locally documented exceptions stop tags being inherited."""
        return bool(self.exceptions)

    @property
    def is_root(self) -> bool:
        """Whether the record is not a member of anything."""
        return not self.memberof or self.scope == "global"
