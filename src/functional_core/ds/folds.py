"""
src/functional_core/ds/folds.py
Estrategia FOLD: todas las operaciones derivadas se expresan con
fold_right / fold_left. Mismos nombres que ds/direct.py para poder
comparar ambas estrategias elemento a elemento.

Divergencia conocida: product_of NO corta en el primer cero; el fold
evalúa la lista completa.
"""
import operator
from typing import Callable, TypeVar

from .list import ConsList, Cons, NIL

A = TypeVar('A')
B = TypeVar('B')


# =============================================================================
# FOLDS (columna vertebral)
# =============================================================================

def fold_right(l: ConsList, seed: B, combine: Callable[[A, B], B]) -> B:
    """combine(a1, combine(a2, ... combine(an, seed))). Pila explícita."""
    return l.fold_right(seed, combine)


def fold_left(l: ConsList, seed: B, combine: Callable[[B, A], B]) -> B:
    """combine(combine(combine(seed, a1), a2), ... an). O(1) frames."""
    return l.fold_left(seed, combine)


def fold_right_via_fold_left(l: ConsList, seed: B, combine: Callable[[A, B], B]) -> B:
    """Dos pasadas: invertir y plegar por la izquierda con combine volteado."""
    return fold_left(reverse(l), seed, lambda acc, x: combine(x, acc))


# =============================================================================
# OPERACIONES DERIVADAS
# =============================================================================

def length(l: ConsList) -> int:
    return fold_right(l, 0, lambda _, acc: acc + 1)


def length_via_fold_left(l: ConsList) -> int:
    return fold_left(l, 0, lambda acc, _: acc + 1)


def sum_of(l: ConsList):
    return fold_left(l, 0, operator.add)


def product_of(l: ConsList):
    return fold_left(l, 1.0, operator.mul)


def append(xs: ConsList, ys: ConsList) -> ConsList:
    return fold_right(xs, ys, Cons)


def append_via_fold_left(xs: ConsList, ys: ConsList) -> ConsList:
    return fold_left(reverse(xs), ys, lambda acc, x: Cons(x, acc))


def reverse(l: ConsList) -> ConsList:
    return fold_left(l, NIL, lambda acc, x: Cons(x, acc))


def init(l: ConsList) -> ConsList:
    # tail() de la inversa lanza EmptyListError sobre Nil
    return reverse(reverse(l).tail)


def last(l: ConsList):
    return fold_left(l.tail, l.head, lambda _, x: x)


def drop(l: ConsList, n: int) -> ConsList:
    def step(state, _):
        left, curr = state
        if left <= 0:
            return state
        return left - 1, curr.tail

    return fold_left(l, (n, l), step)[1]


def drop_while(l: ConsList, predicate: Callable[[A], bool]) -> ConsList:
    def step(state, x):
        dropping, curr = state
        if dropping and predicate(x):
            return True, curr.tail
        return False, curr

    return fold_left(l, (True, l), step)[1]


def map_list(l: ConsList, fn: Callable[[A], B]) -> ConsList:
    return fold_right(l, NIL, lambda h, t: Cons(fn(h), t))


def filter_list(l: ConsList, predicate: Callable[[A], bool]) -> ConsList:
    return fold_right(l, NIL, lambda h, t: Cons(h, t) if predicate(h) else t)


def filter_via_flat_map(l: ConsList, predicate: Callable[[A], bool]) -> ConsList:
    return flat_map(l, lambda x: Cons(x, NIL) if predicate(x) else NIL)


def flatten(ls: ConsList) -> ConsList:
    return fold_right(ls, NIL, append)


def flat_map(l: ConsList, fn: Callable[[A], ConsList]) -> ConsList:
    return flatten(map_list(l, fn))


def zip_with(xs: ConsList, ys: ConsList, combine: Callable) -> ConsList:
    def step(state, x):
        rest, acc = state
        if rest.is_empty:
            return state
        return rest.tail, Cons(combine(x, rest.head), acc)

    return reverse(fold_left(xs, (ys, NIL), step)[1])


def _same(a, b) -> bool:
    return a is b or a == b


def starts_with(l: ConsList, prefix: ConsList) -> bool:
    # zip sobre prefix: O(|prefix|), nunca recorre el resto de l
    matches = zip_with(prefix, l, lambda p, x: _same(x, p))
    # zip trunca: sin esta guarda un l más corto que prefix "coincidiría"
    if length(matches) != length(prefix):
        return False
    return fold_right(matches, True, lambda a, b: bool(a) and b)


def has_subsequence(sup: ConsList, sub: ConsList) -> bool:
    need = length(sub)

    def step(state, _):
        found, remaining, curr = state
        # Se deja de probar tras la coincidencia o cuando el sufijo es más corto que sub
        if found or remaining < need:
            return state
        return starts_with(curr, sub), remaining - 1, curr.tail

    found, remaining, rest = fold_left(sup, (False, length(sup), sup), step)
    return found or (remaining >= need and starts_with(rest, sub))


# =============================================================================
# ESPECIALIZACIONES DE MAP
# =============================================================================

def add_num(l: ConsList, n) -> ConsList:
    return fold_right(l, NIL, lambda h, t: Cons(h + n, t))


def to_strings(l: ConsList) -> ConsList:
    return fold_right(l, NIL, lambda h, t: Cons(str(h), t))
