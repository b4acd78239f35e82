"""
Function tracing decorator.

Routes trace output through the OutputManager singleton at level 3
on the 'trace' channel.
"""

import functools
import inspect


def _short_repr(value):
    """repr() that keeps long strings and lists on one readable line."""
    if isinstance(value, str) and len(value) > 50:
        return repr(value[:47] + '...')
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the OutputManager.

    Shows entry with arguments, then the return value or the raised
    exception, when the 'trace' channel threshold is at least 3.
    Methods show their receiver as 'self'.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_output

        out = get_output()
        if out.threshold('trace') < 3:
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__qualname__

        args_repr = []
        positional = args
        if '.' in func_name and args:
            args_repr.append('self')
            positional = args[1:]
        args_repr.extend(_short_repr(a) for a in positional)
        args_repr.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())

        out.emit(3, "[TRACE] >> {mod}.{fn}({args})", channel='trace',
                 mod=module_name, fn=func_name, args=', '.join(args_repr))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {mod}.{fn} raised: {exc}: {msg}",
                     channel='trace', mod=module_name, fn=func_name,
                     exc=type(e).__name__, msg=str(e))
            raise
        out.emit(3, "[TRACE] << {mod}.{fn} returned: {val}", channel='trace',
                 mod=module_name, fn=func_name, val=_short_repr(result))
        return result

    return wrapper
