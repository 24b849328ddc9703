"""Kind tables shared by the resolver, navigation and page builders."""

# Kinds that potentially get a page of their own, in section order.
CONTAINER_KINDS: tuple[str, ...] = (
    "module",
    "class",
    "namespace",
    "mixin",
    "external",
    "interface",
)

# Kinds that necessarily belong to some other record, in section order.
MEMBER_KINDS: tuple[str, ...] = ("member", "function", "typedef", "constant", "event")

CLASSLIKE_KINDS: tuple[str, ...] = ("namespace", "class", "interface")

KIND_TITLES: dict[str, str] = {
    "module": "Module",
    "class": "Class",
    "namespace": "Namespace",
    "mixin": "Mixin",
    "external": "External",
    "interface": "Interface",
    "source": "Source",
    "member": "Member",
    "function": "Method",
    "constant": "Constant",
    "typedef": "Type Definition",
    "event": "Event",
    "tutorial": "Tutorial",
}

SCOPE_TO_PUNC: dict[str, str] = {"global": "", "static": ".", "instance": "#", "inner": "~"}

# Cap for walks over record relations, which are not guaranteed to be acyclic.
MAX_RESOLUTION_DEPTH = 64
