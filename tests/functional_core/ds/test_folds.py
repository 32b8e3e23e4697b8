"""
tests/functional_core/ds/test_folds.py
Tests de la estrategia FOLD: fold_right, fold_left y sus derivadas.
"""
import operator
import unittest
from functional_core.ds import folds
from functional_core.ds.list import ConsList, Cons, NIL, EmptyListError
from functional_core.limits import STRESS_LENGTH

L = ConsList.of


class TestFolds(unittest.TestCase):

    # =========================================================================
    # 1. ASOCIATIVIDAD DE LOS FOLDS
    # =========================================================================

    def test_fold_right_associates_right(self):
        """combine(1, combine(2, combine(3, seed)))"""
        res = folds.fold_right(L(1, 2, 3), "s", lambda x, acc: f"({x} {acc})")
        self.assertEqual(res, "(1 (2 (3 s)))")

    def test_fold_left_associates_left(self):
        """combine(combine(combine(seed, 1), 2), 3)"""
        res = folds.fold_left(L(1, 2, 3), "s", lambda acc, x: f"({acc} {x})")
        self.assertEqual(res, "(((s 1) 2) 3)")

    def test_fold_right_via_fold_left_matches(self):
        show = lambda x, acc: f"({x} {acc})"
        l = L(1, 2, 3, 4)
        self.assertEqual(folds.fold_right_via_fold_left(l, "s", show),
                         folds.fold_right(l, "s", show))
        self.assertEqual(folds.fold_right_via_fold_left(NIL, "s", show), "s")

    def test_identity_law(self):
        l = L(1, 2, 3)
        self.assertEqual(folds.fold_right(l, NIL, Cons), l)
        self.assertEqual(folds.fold_right_via_fold_left(l, NIL, Cons), l)

    def test_folds_agree_on_associative_combiners(self):
        l = L(3, 1, 4, 1, 5, 9, 2, 6)
        for op, seed in ((operator.add, 0), (operator.mul, 1)):
            right = folds.fold_right(l, seed, op)
            self.assertEqual(folds.fold_left(l, seed, op), right)
            self.assertEqual(folds.fold_right_via_fold_left(l, seed, op), right)

    # =========================================================================
    # 2. DERIVADAS
    # =========================================================================

    def test_product_has_no_short_circuit(self):
        """Divergencia conocida: el fold multiplica la lista completa."""
        self.assertEqual(folds.product_of(L(1.0, 0.0, 99.0)), 0.0)
        with self.assertRaises(TypeError):
            folds.product_of(L(2.0, 0.0, "no-numérico"))

    def test_length_variants(self):
        l = L("a", "b", "c")
        self.assertEqual(folds.length(l), 3)
        self.assertEqual(folds.length_via_fold_left(l), 3)
        self.assertEqual(folds.length(NIL), 0)

    def test_append_variants(self):
        xs, ys = L(1, 2), L(3)
        self.assertEqual(folds.append(xs, ys), L(1, 2, 3))
        self.assertEqual(folds.append_via_fold_left(xs, ys), L(1, 2, 3))
        self.assertIs(folds.append(xs, ys).tail.tail, ys)
        self.assertIs(folds.append_via_fold_left(xs, ys).tail.tail, ys)

    def test_init_last_on_empty(self):
        with self.assertRaises(EmptyListError):
            folds.init(NIL)
        with self.assertRaises(EmptyListError):
            folds.last(NIL)
        self.assertIs(folds.init(L(1)), NIL)
        self.assertEqual(folds.last(L(1)), 1)

    def test_drop_keeps_sharing(self):
        l = L(1, 2, 3)
        self.assertIs(folds.drop(l, 2), l.tail.tail)
        self.assertIs(folds.drop(l, 7), NIL)
        self.assertIs(folds.drop(l, -1), l)

    def test_drop_while_stops_calling_predicate(self):
        calls = []

        def small(x):
            calls.append(x)
            return x < 3

        self.assertEqual(folds.drop_while(L(1, 2, 3, 1), small), L(3, 1))
        self.assertEqual(calls, [1, 2, 3])

    def test_filter_via_flat_map(self):
        even = lambda x: x % 2 == 0
        l = L(1, 2, 3, 4, 5, 6)
        self.assertEqual(folds.filter_via_flat_map(l, even), L(2, 4, 6))
        self.assertEqual(folds.filter_via_flat_map(l, even), folds.filter_list(l, even))

    def test_starts_with_shorter_list(self):
        """zip trunca: la guarda de longitud evita el falso positivo."""
        self.assertFalse(folds.starts_with(L(1), L(1, 2)))
        self.assertTrue(folds.starts_with(L(1, 2), L(1)))
        self.assertTrue(folds.starts_with(NIL, NIL))

    def test_map_specialisations(self):
        self.assertEqual(folds.add_num(L(1, 2, 3), 10), L(11, 12, 13))
        self.assertEqual(folds.to_strings(L(1, 2.5)), L("1", "2.5"))
        self.assertIs(folds.add_num(NIL, 1), NIL)

    def test_subsequence_stops_after_match(self):
        """Tras la coincidencia no se vuelve a comparar ningún elemento."""
        calls = []

        class Tracked:
            def __init__(self, v): self.v = v
            def __eq__(self, other):
                calls.append(self.v)
                return isinstance(other, Tracked) and self.v == other.v
            __hash__ = None

        sup = ConsList.from_python(Tracked(i) for i in range(6))
        self.assertTrue(folds.has_subsequence(sup, L(Tracked(0))))
        self.assertEqual(calls, [0])

    def test_stress_has_subsequence(self):
        """Ventana deslizante lineal en |sup| para sub de tamaño fijo."""
        N = STRESS_LENGTH
        big = ConsList.from_python(range(N))

        self.assertFalse(folds.has_subsequence(big, L(-1)))
        self.assertTrue(folds.has_subsequence(big, L(N - 2, N - 1)))
        self.assertTrue(folds.has_subsequence(big, L(0, 1)))
        self.assertFalse(folds.has_subsequence(L(1, 2), big))

    def test_stress_fold_right_is_stack_safe(self):
        N = STRESS_LENGTH
        big = ConsList.from_python(range(N))

        self.assertEqual(folds.fold_right(big, NIL, Cons), big)
        self.assertEqual(folds.length(big), N)
        self.assertEqual(folds.map_list(big, lambda x: x + 1).head, 1)
        self.assertEqual(folds.reverse(big).head, N - 1)
        self.assertEqual(folds.last(big), N - 1)


if __name__ == '__main__':
    unittest.main()
