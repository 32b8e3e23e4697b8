"""
src/functional_core/ds/list.py
Estructura de Datos Persistente: Lista Enlazada (Cons List).
Dos variantes selladas: Nil (vacía) y Cons (head, tail).
Versión 3.0: Generic & Stack-Safe.
"""
from typing import Any, Callable, Generic, Iterable, Iterator, List as PyList, TypeVar

from ..limits import REPR_LIMIT

T = TypeVar('T')
U = TypeVar('U')
B = TypeVar('B')


class EmptyListError(IndexError):
    """Acceso estructural (head, tail, init, last) sobre la lista vacía."""


class ConsList(Generic[T]):
    """
    Lista Inmutable Persistente.
    Base abstracta: las únicas instancias son Nil y Cons.
    Las colas se comparten entre listas (structural sharing); ninguna operación muta.
    """
    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Constructores Estáticos ---

    @staticmethod
    def nil() -> 'ConsList':
        return NIL

    @staticmethod
    def cons(head: T, tail: 'ConsList[T]') -> 'ConsList[T]':
        """O(1) Prepend."""
        return Cons(head, tail)

    @staticmethod
    def of(*items: T) -> 'ConsList[T]':
        """ConsList.of(1, 2, 3) -> List[1, 2, 3]."""
        return ConsList.from_python(items)

    @staticmethod
    def from_python(items: Iterable[T]) -> 'ConsList[T]':
        """O(N). Construye desde cualquier iterable de Python."""
        acc = NIL
        # Iteración inversa para construir O(N) sin recursión
        for item in reversed(list(items)):
            acc = Cons(item, acc)
        return acc

    @staticmethod
    def fill(n: int, item: T) -> 'ConsList[T]':
        """n copias de item. n <= 0 produce Nil."""
        acc = NIL
        for _ in range(n):
            acc = Cons(item, acc)
        return acc

    # --- Acceso Estructural (cada variante lo resuelve) ---

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError

    @property
    def head(self) -> T:
        raise NotImplementedError

    @property
    def tail(self) -> 'ConsList[T]':
        raise NotImplementedError

    def set_head(self, new_head: T) -> 'ConsList[T]':
        """Nueva lista con new_head y la MISMA cola."""
        return Cons(new_head, self.tail)

    # --- FUNCTIONAL API (High Order Functions) ---

    def fold_left(self, seed: B, combine: Callable[[B, T], B]) -> B:
        """Reduce la lista de izquierda a derecha. Bucle iterativo."""
        acc = seed
        curr = self
        while not curr.is_empty:
            acc = combine(acc, curr.head)
            curr = curr.tail
        return acc

    # Alias histórico (Left Fold)
    def fold(self, fn: Callable[[B, T], B], initial: B) -> B:
        return self.fold_left(initial, fn)

    def fold_right(self, seed: B, combine: Callable[[T, B], B]) -> B:
        """
        combine(a1, combine(a2, ... combine(an, seed))).
        Pila explícita en vez de recursión: seguro para listas de 1M+ elementos.
        """
        stack = self.to_python()
        acc = seed
        while stack:
            acc = combine(stack.pop(), acc)
        return acc

    def map(self, fn: Callable[[T], U]) -> 'ConsList[U]':
        from .direct import map_list
        return map_list(self, fn)

    def filter(self, predicate: Callable[[T], bool]) -> 'ConsList[T]':
        from .direct import filter_list
        return filter_list(self, predicate)

    def flat_map(self, fn: Callable[[T], 'ConsList[U]']) -> 'ConsList[U]':
        from .direct import flat_map
        return flat_map(self, fn)

    def append(self, other: 'ConsList[T]') -> 'ConsList[T]':
        from .direct import append
        return append(self, other)

    def reverse(self) -> 'ConsList[T]':
        from .direct import reverse
        return reverse(self)

    def init(self) -> 'ConsList[T]':
        from .direct import init
        return init(self)

    def last(self) -> T:
        from .direct import last
        return last(self)

    def drop(self, n: int) -> 'ConsList[T]':
        from .direct import drop
        return drop(self, n)

    def drop_while(self, predicate: Callable[[T], bool]) -> 'ConsList[T]':
        from .direct import drop_while
        return drop_while(self, predicate)

    def zip_with(self, other: 'ConsList[U]', combine: Callable[[T, U], B]) -> 'ConsList[B]':
        from .direct import zip_with
        return zip_with(self, other, combine)

    def starts_with(self, prefix: 'ConsList[T]') -> bool:
        from .direct import starts_with
        return starts_with(self, prefix)

    def has_subsequence(self, sub: 'ConsList[T]') -> bool:
        from .direct import has_subsequence
        return has_subsequence(self, sub)

    def to_python(self) -> PyList[T]:
        return list(self)

    # --- PYTHON MAGIC METHODS ---

    def __iter__(self) -> Iterator[T]:
        """Iterador seguro O(N)."""
        curr = self
        while not curr.is_empty:
            yield curr.head
            curr = curr.tail

    def __len__(self) -> int:
        """O(N) Iterativo. Safe for 1M+ items."""
        count = 0
        curr = self
        while not curr.is_empty:
            count += 1
            curr = curr.tail
        return count

    def __bool__(self) -> bool:
        return not self.is_empty

    def __repr__(self):
        """Impresión segura. Trunca si es muy larga."""
        if self.is_empty: return "Nil"

        items = []
        count = 0

        curr = self
        while not curr.is_empty and count < REPR_LIMIT:
            items.append(repr(curr.head))
            curr = curr.tail
            count += 1

        if not curr.is_empty:
            items.append("...")

        return f"List[{', '.join(items)}]"

    def __eq__(self, other):
        """Igualdad estructural O(N), iterativa. Corta en la primera cola compartida."""
        if not isinstance(other, ConsList): return False
        a, b = self, other
        while True:
            if a is b: return True
            if a.is_empty or b.is_empty: return False
            # Identidad antes que valor (como list de Python): NaN == NaN si es el mismo objeto
            if a.head is not b.head and a.head != b.head: return False
            a, b = a.tail, b.tail

    def __hash__(self):
        return hash(tuple(self))


class Nil(ConsList):
    """Lista vacía. Singleton: usar NIL o ConsList.nil()."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def head(self):
        raise EmptyListError("head of empty list")

    @property
    def tail(self) -> ConsList:
        raise EmptyListError("tail of empty list")

    def set_head(self, new_head):
        raise EmptyListError("set_head of empty list")

    def __reduce__(self):
        return (Nil, ())


class Cons(ConsList):
    """Celda (head, tail). La cola es SIEMPRE un ConsList."""
    __slots__ = ('_head', '_tail')

    def __init__(self, head: T, tail: ConsList):
        # Validación defensiva: tail debe ser una lista
        if not isinstance(tail, ConsList):
            raise TypeError(f"Tail must be ConsList, got {type(tail)}")
        object.__setattr__(self, '_head', head)
        object.__setattr__(self, '_tail', tail)

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def head(self) -> T:
        return self._head

    @property
    def tail(self) -> ConsList:
        return self._tail

    def __reduce__(self):
        # Se serializa como lista plana: evita recursión en pickle para listas largas.
        return (_from_items, (self.to_python(),))


NIL = Nil()


def _from_items(items) -> ConsList:
    return ConsList.from_python(items)


# =============================================================================
# API FUNCIONAL (forma libre de las primitivas)
# =============================================================================

def nil() -> ConsList:
    return NIL


def cons(head: T, tail: ConsList) -> ConsList:
    return Cons(head, tail)


def is_empty(l: ConsList) -> bool:
    return l.is_empty


def head(l: ConsList):
    return l.head


def tail(l: ConsList) -> ConsList:
    return l.tail


def set_head(l: ConsList, new_head) -> ConsList:
    return l.set_head(new_head)
