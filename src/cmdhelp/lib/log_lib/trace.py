"""
Function tracing decorator.

Routes trace output through the OutputManager singleton at level 3 on the
'trace' channel.
"""

import functools
import inspect


def _short_repr(value):
    """Abbreviate long strings and lists for trace lines."""
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the OutputManager.

    Shows entry/exit with arguments and return values when the 'trace'
    channel threshold is at least 3 (--show trace:3).
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .manager import get_output

        out = get_output()
        if not out.channel_active('trace', 3):
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__name__

        args_repr = [_short_repr(arg) for arg in args]
        args_repr.extend(f"{key}={_short_repr(value)}"
                         for key, value in kwargs.items())
        args_str = ', '.join(args_repr)

        out.emit(3, "[TRACE] >> {mod}.{fn}({args})",
                 channel='trace', mod=module_name, fn=func_name, args=args_str)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {mod}.{fn} raised: {exc}: {msg}",
                     channel='trace', mod=module_name, fn=func_name,
                     exc=type(e).__name__, msg=str(e))
            raise

        if result is not None:
            out.emit(3, "[TRACE] << {mod}.{fn} returned: {val}",
                     channel='trace', mod=module_name, fn=func_name,
                     val=_short_repr(result))
        return result

    return wrapper
