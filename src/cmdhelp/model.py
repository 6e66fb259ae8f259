"""Command model consumed by the help renderer.

A tree of Nodes (the Application root and its commands), each carrying
positional arguments and flags. Model builders (see cmdhelp.loader)
construct the tree once; the renderer only reads it.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional, TextIO


@dataclass
class Positional:
    """A named positional argument slot."""
    name: str
    help: str = ""
    required: bool = True
    cumulative: bool = False

    def summary(self) -> str:
        """Return the usage form, e.g. ``<path>`` or ``[<path> ...]``."""
        text = f"<{self.name}>"
        if self.cumulative:
            text += " ..."
        if not self.required:
            text = f"[{text}]"
        return text


@dataclass
class Flag:
    """A named flag.

    Attributes:
        name: Long name without dashes ("dry-run")
        short: Optional single-character short name ("n")
        is_bool: Boolean flags take no value
        placeholder: Value hint for non-boolean flags
        default: Default value, used as a value hint when no placeholder
    """
    name: str
    help: str = ""
    short: Optional[str] = None
    is_bool: bool = False
    placeholder: str = ""
    default: Any = None
    required: bool = False
    hidden: bool = False

    def format_placeholder(self) -> str:
        """Return the value hint shown after ``=`` in help output."""
        if self.placeholder:
            return self.placeholder
        if self.default is not None and self.default != "":
            if isinstance(self.default, str):
                return f'"{self.default}"'
            return str(self.default)
        return self.name.upper().replace("-", "_")

    def summary(self) -> str:
        """Return the usage form, e.g. ``--output=PATH``."""
        if self.is_bool:
            return f"--{self.name}"
        return f"--{self.name}={self.format_placeholder()}"


@dataclass(eq=False)
class Node:
    """A renderable unit: the application root or a command."""
    name: str
    help: str = ""
    positional: List[Positional] = field(default_factory=list)
    flags: List[Flag] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)
    hidden: bool = False
    parent: Optional["Node"] = field(default=None, repr=False)

    def __post_init__(self):
        for child in self.children:
            child.parent = self

    @property
    def is_app(self) -> bool:
        return self.parent is None

    def add(self, child: "Node") -> "Node":
        """Attach a child command and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def path(self) -> str:
        """Command path below the root, e.g. ``"remote add"``.

        The root's path is its own name.
        """
        if self.parent is None:
            return self.name
        names = []
        node = self
        while node.parent is not None:
            names.append(node.name)
            node = node.parent
        return " ".join(reversed(names))

    def all_flags(self, hide: bool = False) -> List[List[Flag]]:
        """Flags in scope, one group per node from the root down.

        Inherited groups come first. Empty groups are dropped.
        """
        groups = []
        if self.parent is not None:
            groups.extend(self.parent.all_flags(hide))
        group = [flag for flag in self.flags if not (hide and flag.hidden)]
        if group:
            groups.append(group)
        return groups

    def leaves(self) -> List["Node"]:
        """Direct child commands, hidden ones excluded."""
        return [child for child in self.children if not child.hidden]

    def summary(self) -> str:
        """One-line usage form derived from the node's arguments and flags."""
        parts = [self.path()]
        flags = [flag for group in self.all_flags(hide=True) for flag in group]
        parts.extend(flag.summary() for flag in flags if flag.required)
        if self.positional:
            parts.extend(arg.summary() for arg in self.positional)
        elif self.children:
            parts.append("<command>")
        if any(not flag.required for flag in flags):
            parts.append("[flags]")
        return " ".join(parts)

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, path) -> Optional["Node"]:
        """Resolve a descendant by path.

        ``path`` is a list of names or a string separated by spaces or dots.
        Hidden commands resolve too. Returns None when nothing matches.
        """
        if isinstance(path, str):
            path = path.replace(".", " ").split()
        node = self
        for name in path:
            node = next((c for c in node.children if c.name == name), None)
            if node is None:
                return None
        return node


@dataclass(eq=False)
class Application(Node):
    """The root node plus the stream help is written to."""
    stdout: TextIO = field(default=None, repr=False)

    def __post_init__(self):
        super().__post_init__()
        if self.stdout is None:
            self.stdout = sys.stdout


class Context:
    """What the renderer needs to know about one help request.

    Args:
        app: The application root
        selected: The selected command, or None for top-level help
    """

    def __init__(self, app: Application, selected: Optional[Node] = None):
        self.app = app
        self.selected = selected

    def empty(self) -> bool:
        """True when the model defines no commands anywhere."""
        return not self.app.children
