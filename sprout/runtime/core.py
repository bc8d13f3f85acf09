"""
sprout.runtime.core - Runtime helpers called by destructuring code

These are the functions binding plans call at runtime:
- first: first element of a sequence (nil-punning)
- rest: remaining elements of a sequence, as a tuple
- get: keyed lookup in a map
- nth: indexed lookup in an array

run_plan() executes a BindingPlan directly against Python values, which
is how the tests check that a plan projects a value the way its pattern
says it should.
"""

from typing import Any, Optional

from sprout.runtime.types import Symbol


def first(coll):
    """Return the first element of a collection, or None when it is empty."""
    if coll is None:
        return None
    try:
        it = iter(coll)
        return next(it, None)
    except TypeError:
        return None


def rest(coll):
    """Return all but the first element of a collection as a tuple.

    An exhausted (or nil) collection yields the empty tuple.
    """
    if coll is None:
        return ()
    try:
        it = iter(coll)
        next(it, None)  # skip first
        return tuple(it)
    except TypeError:
        return ()


def get(coll, key, default=None):
    """Get a value from a map by key."""
    if coll is None:
        return default
    if hasattr(coll, "get"):
        return coll.get(key, default)
    try:
        return coll[key]
    except (IndexError, KeyError, TypeError):
        return default


def nth(coll, index, default=None):
    """Get the element at `index`, or `default` when out of range."""
    if coll is None:
        return default
    try:
        return coll[index]
    except (IndexError, KeyError, TypeError):
        return default


def run_plan(plan, env: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """
    Execute a BindingPlan sequentially and return the resulting environment.

    Values in the plan are evaluated as follows:
    - Symbol: looked up among earlier targets (and `env`)
    - Access: the matching helper above, applied to its target's value
    - anything else: used as-is

    Raises:
        NameError: if a Symbol is read before it is bound
    """
    # Imported here to keep the runtime free of compiler imports at load time
    from sprout.compiler.plan import Access, AccessKind

    scope: dict[str, Any] = dict(env or {})

    def lookup(symbol: Symbol):
        try:
            return scope[symbol.name]
        except KeyError:
            raise NameError(f"Unbound symbol: {symbol.name}") from None

    helpers = {
        AccessKind.FIRST: lambda target, _: first(target),
        AccessKind.REST: lambda target, _: rest(target),
        AccessKind.KEYED: get,
        AccessKind.INDEXED: nth,
    }

    for binding in plan:
        value = binding.value
        if isinstance(value, Symbol):
            value = lookup(value)
        elif isinstance(value, Access):
            value = helpers[value.kind](lookup(value.target), value.key)
        scope[binding.target.name] = value

    return scope
