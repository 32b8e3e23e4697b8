"""
src/functional_core/ds/direct.py
Estrategia DIRECTA: cada operación analiza los casos Nil / Cons celda a celda.
Las definiciones recursivas (x + sum(xs), Cons(h, append(t, ys)), ...) se
evalúan con bucles y pilas explícitas: Python no elimina llamadas de cola.
"""
from typing import Callable, List as PyList, TypeVar

from .list import ConsList, Cons, NIL, EmptyListError

T = TypeVar('T')
U = TypeVar('U')
C = TypeVar('C')


def _rebuild(items: PyList, tail: ConsList = NIL) -> ConsList:
    """Vuelca una pila Python sobre tail conservando el orden."""
    acc = tail
    while items:
        acc = Cons(items.pop(), acc)
    return acc


def length(l: ConsList) -> int:
    count = 0
    curr = l
    while not curr.is_empty:
        count += 1
        curr = curr.tail
    return count


def sum_of(l: ConsList):
    """x1 + (x2 + (... + (xn + 0)))."""
    stack = list(l)
    acc = 0
    while stack:
        acc = stack.pop() + acc
    return acc


def product_of(l: ConsList):
    """
    x1 * (x2 * (... * 1.0)).
    Corto-circuito: al encontrar un cero la cola NO se inspecciona
    (el resto de la lista puede contener cualquier cosa).
    """
    prefix = []
    acc = 1.0
    curr = l
    while not curr.is_empty:
        x = curr.head
        if x == 0:
            acc = 0.0
            break
        prefix.append(x)
        curr = curr.tail
    while prefix:
        acc = prefix.pop() * acc
    return acc


def append(xs: ConsList, ys: ConsList) -> ConsList:
    """O(|xs|). ys se comparte, no se copia."""
    return _rebuild(list(xs), ys)


def reverse(l: ConsList) -> ConsList:
    acc = NIL
    curr = l
    while not curr.is_empty:
        acc = Cons(curr.head, acc)
        curr = curr.tail
    return acc


def init(l: ConsList) -> ConsList:
    """Todos menos el último."""
    if l.is_empty:
        raise EmptyListError("init of empty list")
    items = []
    curr = l
    while not curr.tail.is_empty:
        items.append(curr.head)
        curr = curr.tail
    return _rebuild(items)


def last(l: ConsList):
    if l.is_empty:
        raise EmptyListError("last of empty list")
    curr = l
    while not curr.tail.is_empty:
        curr = curr.tail
    return curr.head


def drop(l: ConsList, n: int) -> ConsList:
    """Quita n elementos. Pasado el final se queda en Nil (no es error)."""
    curr = l
    while n > 0 and not curr.is_empty:
        curr = curr.tail
        n -= 1
    return curr


def drop_while(l: ConsList, predicate: Callable[[T], bool]) -> ConsList:
    curr = l
    while not curr.is_empty and predicate(curr.head):
        curr = curr.tail
    return curr


def map_list(l: ConsList, fn: Callable[[T], U]) -> ConsList:
    """
    Aplica fn a cada elemento y retorna una NUEVA lista persistente.
    Implementación ITERATIVA para evitar Stack Overflow en listas grandes.
    """
    if l.is_empty: return l

    # 1. Recolectar resultados en lista Python temporal (rápido en RAM)
    temp_items = [fn(x) for x in l]

    # 2. Reconstruir ConsList
    return _rebuild(temp_items)


def filter_list(l: ConsList, predicate: Callable[[T], bool]) -> ConsList:
    """Nueva lista solo con los elementos que cumplen predicate."""
    if l.is_empty: return l
    return _rebuild([x for x in l if predicate(x)])


def flatten(ls: ConsList) -> ConsList:
    """Concatena las sublistas en orden. La última sublista se comparte."""
    stack = list(ls)
    acc = stack.pop() if stack else NIL
    while stack:
        acc = append(stack.pop(), acc)
    return acc


def flat_map(l: ConsList, fn: Callable[[T], ConsList]) -> ConsList:
    return flatten(map_list(l, fn))


def zip_with(xs: ConsList, ys: ConsList, combine: Callable[[T, U], C]) -> ConsList:
    """Empareja por posición; se detiene en cuanto una de las dos se agota."""
    items = []
    a, b = xs, ys
    while not a.is_empty and not b.is_empty:
        items.append(combine(a.head, b.head))
        a, b = a.tail, b.tail
    return _rebuild(items)


def starts_with(l: ConsList, prefix: ConsList) -> bool:
    a, p = l, prefix
    while not p.is_empty:
        if a.is_empty or (a.head is not p.head and a.head != p.head):
            return False
        a, p = a.tail, p.tail
    return True


def has_subsequence(sup: ConsList, sub: ConsList) -> bool:
    """
    Ventana deslizante: prueba starts_with en cada sufijo de sup
    hasta encontrar coincidencia o hasta que el sufijo sea más corto que sub.
    """
    need = length(sub)
    remaining = length(sup)
    curr = sup
    while remaining >= need:
        if starts_with(curr, sub):
            return True
        if curr.is_empty:
            break
        curr = curr.tail
        remaining -= 1
    return False
