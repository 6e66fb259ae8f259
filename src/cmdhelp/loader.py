"""Build command models from JSON documents and argparse parsers.

JSON / dict model format::

    {
      "name": "app",
      "help": "What the app does.",
      "flags": [
        {"name": "verbose", "short": "v", "bool": true, "help": "..."},
        {"name": "output", "placeholder": "PATH", "help": "..."}
      ],
      "positional": [{"name": "path", "required": false}],
      "commands": [
        {"name": "build", "help": "...", "commands": [...]}
      ]
    }

Missing lists are treated as empty and unknown keys are ignored.
"""

import argparse
import json

from cmdhelp.errors import ModelError
from cmdhelp.lib.log_lib import get_output, trace
from cmdhelp.model import Application, Flag, Node, Positional


# ---------------------------------------------------------------------------
# dict / JSON
# ---------------------------------------------------------------------------
def _require_name(data, what):
    name = data.get("name") or data.get("long")
    if not isinstance(name, str) or not name:
        raise ModelError(f"{what} is missing a name: {data!r}")
    return name


def _flag_from_dict(data):
    if not isinstance(data, dict):
        raise ModelError(f"flag must be an object, got {data!r}")
    name = _require_name(data, "flag")
    short = data.get("short") or None
    if short is not None and (not isinstance(short, str) or len(short) != 1):
        raise ModelError(f"flag '{name}' has an invalid short name: {short!r}")
    is_bool = bool(data.get("bool", data.get("type") == "bool"))
    return Flag(
        name=name,
        help=data.get("help") or "",
        short=short,
        is_bool=is_bool,
        placeholder=data.get("placeholder") or "",
        default=data.get("default"),
        required=bool(data.get("required", False)),
        hidden=bool(data.get("hidden", False)),
    )


def _positional_from_dict(data):
    if not isinstance(data, dict):
        raise ModelError(f"positional must be an object, got {data!r}")
    return Positional(
        name=_require_name(data, "positional"),
        help=data.get("help") or "",
        required=bool(data.get("required", True)),
        cumulative=bool(data.get("cumulative", False)),
    )


def _fill_node(node, data):
    node.help = data.get("help") or ""
    node.hidden = bool(data.get("hidden", False))
    node.flags = [_flag_from_dict(f) for f in data.get("flags") or []]
    node.positional = [_positional_from_dict(p)
                       for p in data.get("positional") or []]
    for child in data.get("commands") or []:
        if not isinstance(child, dict):
            raise ModelError(f"command must be an object, got {child!r}")
        node.add(_fill_node(Node(name=_require_name(child, "command")), child))
    return node


@trace
def app_from_dict(data, stdout=None) -> Application:
    """Build an Application from a model document.

    Raises:
        ModelError: If the document is malformed
    """
    if not isinstance(data, dict):
        raise ModelError(f"model must be an object, got {type(data).__name__}")
    app = Application(name=_require_name(data, "application"), stdout=stdout)
    _fill_node(app, data)
    get_output().emit(1, "  [model] loaded '{name}': {n} command(s)",
                      channel='model', name=app.name,
                      n=sum(1 for _ in app.walk()) - 1)
    return app


def load_app(path, stdout=None) -> Application:
    """Load an Application from a JSON model file.

    Raises:
        ModelError: If the file cannot be read or parsed
    """
    get_output().emit(2, "  [model] reading {path}", channel='model', path=path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ModelError(f"cannot read model file {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ModelError(f"invalid JSON in {path}: {e}") from e
    return app_from_dict(data, stdout=stdout)


# ---------------------------------------------------------------------------
# argparse
# ---------------------------------------------------------------------------
def _expand_help(action, prog):
    """Expand %(default)s style placeholders the way argparse does."""
    text = action.help or ""
    if "%" not in text:
        return text
    params = {k: v for k, v in vars(action).items() if v is not argparse.SUPPRESS}
    params["prog"] = prog
    if params.get("choices") is not None:
        params["choices"] = ", ".join(str(c) for c in params["choices"])
    try:
        return text % params
    except (KeyError, TypeError, ValueError) as e:
        raise ModelError(f"bad help string for {action.dest!r}: {text!r}") from e


def _metavar(action):
    if isinstance(action.metavar, tuple):
        return " ".join(action.metavar)
    return action.metavar


def _flag_from_action(action, prog):
    long_names = [s for s in action.option_strings if s.startswith("--")]
    short_names = [s for s in action.option_strings
                   if len(s) == 2 and s[0] != s[1]]
    if long_names:
        name = long_names[0][2:]
    else:
        name = action.dest.replace("_", "-")
    return Flag(
        name=name,
        help=_expand_help(action, prog),
        short=short_names[0][1] if short_names else None,
        is_bool=action.nargs == 0,
        placeholder=_metavar(action) or action.dest.upper(),
        required=bool(action.required),
        hidden=action.help == argparse.SUPPRESS,
    )


def _positional_from_action(action, prog):
    return Positional(
        name=_metavar(action) or action.dest,
        help=_expand_help(action, prog),
        required=action.nargs not in ("?", "*"),
        cumulative=action.nargs in ("*", "+", argparse.REMAINDER),
    )


def _fill_from_parser(node, parser):
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            helps = {choice.dest: choice.help for choice in action._choices_actions}
            seen = set()
            for name, sub in action.choices.items():
                if id(sub) in seen:
                    continue  # alias
                seen.add(id(sub))
                text = helps.get(name)
                child = Node(name=name,
                             help=(text if text and text != argparse.SUPPRESS
                                   else sub.description or ""),
                             hidden=text == argparse.SUPPRESS)
                node.add(_fill_from_parser(child, sub))
        elif action.option_strings:
            node.flags.append(_flag_from_action(action, parser.prog))
        elif action.help != argparse.SUPPRESS:
            node.positional.append(_positional_from_action(action, parser.prog))
    return node


@trace
def app_from_argparse(parser: argparse.ArgumentParser, stdout=None) -> Application:
    """Build an Application from an ``argparse.ArgumentParser``.

    Optionals become flags, positionals become positional arguments and
    sub-parsers become commands.

    Raises:
        ModelError: If a help string cannot be expanded
    """
    app = Application(name=parser.prog, help=parser.description or "",
                      stdout=stdout)
    _fill_from_parser(app, parser)
    get_output().emit(1, "  [model] converted parser '{name}': {n} command(s)",
                      channel='model', name=app.name,
                      n=sum(1 for _ in app.walk()) - 1)
    return app
