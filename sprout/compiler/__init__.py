"""
sprout.compiler - Binding-form compilation

This package expands binding patterns of let-style forms into flat,
ordered binding plans for the code generator.

Modules:
1. patterns.py: Pattern shapes and conversion from reader forms
2. gensym.py: Session-scoped fresh symbol allocation
3. destructure.py: Patterns -> BindingPlan
4. plan.py: Binding plans and runtime helper nodes
"""

from sprout.compiler.destructure import (
    PatternCompiler,
    RestState,
    compile_destructure,
    is_destructuring_pattern,
)
from sprout.compiler.errors import (
    BindingArityError,
    DestructureError,
    MalformedRestError,
    UnsupportedPatternError,
)
from sprout.compiler.gensym import (
    GensymAllocator,
    current_allocator,
    gensym,
    gensym_session,
)
from sprout.compiler.location import (
    SourceList,
    SourceLocation,
    copy_location,
    get_source_location,
    set_location,
)
from sprout.compiler.patterns import (
    IndexedPattern,
    MapPattern,
    Pattern,
    RestMarker,
    SequencePattern,
    SymbolPattern,
    pattern_from_form,
)
from sprout.compiler.plan import Access, AccessKind, Binding, BindingPlan
