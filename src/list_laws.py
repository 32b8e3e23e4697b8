"""
src/list_laws.py
Auditoría de Leyes Algebraicas de ConsList.
Genera listas aleatorias de racionales exactos (sympy) y verifica que las
estrategias DIRECTA y FOLD cumplen las mismas leyes.

Uso: python src/list_laws.py [N_MUESTRAS]
"""
import sys
import time
import random
from multiprocessing import Pool, cpu_count
from sympy import Rational

from functional_core.ds.list import ConsList, Cons, NIL
from functional_core.ds import direct, folds
from functional_core.limits import AUDIT_SAMPLES, AUDIT_MAX_LENGTH, AUDIT_SEED, AUDIT_BATCHES


class ListLaws:
    """
    Leyes verificables sobre una lista concreta.
    Cada método retorna True si la ley se cumple.
    Aritmética exacta (Rational) salvo en product_of: ambas estrategias
    siembran 1.0 y el resultado pasa a Float, así que se compara con tolerancia.
    """

    @staticmethod
    def identity(l: ConsList) -> bool:
        """fold_right(l, Nil, Cons) == l"""
        return folds.fold_right(l, NIL, Cons) == l

    @staticmethod
    def reverse_involution(l: ConsList) -> bool:
        return (direct.length(direct.reverse(l)) == direct.length(l)
                and direct.reverse(direct.reverse(l)) == l
                and folds.reverse(folds.reverse(l)) == l)

    @staticmethod
    def append_length(l1: ConsList, l2: ConsList) -> bool:
        expected = direct.length(l1) + direct.length(l2)
        return (direct.length(direct.append(l1, l2)) == expected
                and folds.length(folds.append(l1, l2)) == expected)

    @staticmethod
    def map_fusion(l: ConsList) -> bool:
        f = lambda x: x * 3
        g = lambda x: x - Rational(1, 2)
        return (direct.map_list(direct.map_list(l, f), g) == direct.map_list(l, lambda x: g(f(x)))
                and folds.map_list(folds.map_list(l, f), g) == folds.map_list(l, lambda x: g(f(x))))

    @staticmethod
    def filter_idempotence(l: ConsList) -> bool:
        p = lambda x: x > 0
        return (direct.filter_list(direct.filter_list(l, p), p) == direct.filter_list(l, p)
                and folds.filter_list(folds.filter_list(l, p), p) == folds.filter_list(l, p))

    @staticmethod
    def folds_agree(l: ConsList) -> bool:
        add = lambda a, b: a + b
        mul = lambda a, b: a * b
        return (folds.fold_left(l, 0, add) == folds.fold_right(l, 0, add)
                == folds.fold_right_via_fold_left(l, 0, add)
                and folds.fold_left(l, 1, mul) == folds.fold_right(l, 1, mul)
                == folds.fold_right_via_fold_left(l, 1, mul))

    @staticmethod
    def strategies_agree(l: ConsList, other: ConsList) -> bool:
        """direct.* == folds.* para cada operación derivada."""
        p = lambda x: x > 0
        pairs = [
            (direct.length(l), folds.length(l)),
            (direct.sum_of(l), folds.sum_of(l)),
            (direct.append(l, other), folds.append(l, other)),
            (direct.reverse(l), folds.reverse(l)),
            (direct.drop(l, 3), folds.drop(l, 3)),
            (direct.drop_while(l, p), folds.drop_while(l, p)),
            (direct.zip_with(l, other, lambda a, b: a - b), folds.zip_with(l, other, lambda a, b: a - b)),
            (direct.starts_with(l, other), folds.starts_with(l, other)),
            (direct.has_subsequence(l, other), folds.has_subsequence(l, other)),
        ]
        if not l.is_empty:
            pairs.append((direct.init(l), folds.init(l)))
            pairs.append((direct.last(l), folds.last(l)))
        # product_of: el orden de las multiplicaciones en coma flotante difiere
        a, b = direct.product_of(l), folds.product_of(l)
        return all(x == y for x, y in pairs) and abs(a - b) <= 1e-9 * max(1, abs(a))


def random_list(rng: random.Random, max_length: int = AUDIT_MAX_LENGTH) -> ConsList:
    """Racionales pequeños, con ceros y negativos frecuentes."""
    n = rng.randint(0, max_length)
    return ConsList.from_python(Rational(rng.randint(-4, 4), rng.randint(1, 3)) for _ in range(n))


def audit_law(name, law, *lists):
    """Ejecuta una ley; una excepción cuenta como fractura."""
    try:
        return None if law(*lists) else (name, repr(lists[0]), "FALSO")
    except Exception as err:
        return name, repr(lists[0]), f"{type(err).__name__}: {err}"


# ==============================================================================
# AUDITORÍA
# ==============================================================================

def audit_worker(args):
    batch_id, seed, count = args
    rng = random.Random(seed + batch_id)

    fails = []
    for _ in range(count):
        l, other = random_list(rng), random_list(rng, 4)
        # Sublista tomada de l: fuerza casos positivos de has_subsequence
        window = direct.drop(l, rng.randint(0, AUDIT_MAX_LENGTH))
        window = ConsList.from_python(list(window)[:rng.randint(0, 3)])

        checks = [
            ("IDENTIDAD", ListLaws.identity, l),
            ("REVERSE", ListLaws.reverse_involution, l),
            ("APPEND", ListLaws.append_length, l, other),
            ("MAP_FUSION", ListLaws.map_fusion, l),
            ("FILTER_IDEMPOTENTE", ListLaws.filter_idempotence, l),
            ("FOLDS", ListLaws.folds_agree, l),
            ("ESTRATEGIAS", ListLaws.strategies_agree, l, other),
            ("ESTRATEGIAS_SUBSECUENCIA", ListLaws.strategies_agree, l, window),
        ]
        for name, law, *lists in checks:
            res = audit_law(name, law, *lists)
            if res is not None:
                fails.append(res)
                print(f"🚨 FRACTURA: {name} | {res[1]} | {res[2]}", flush=True)
    return fails


def run_law_audit(samples: int = AUDIT_SAMPLES, processes: int = None, seed: int = AUDIT_SEED) -> int:
    """Retorna el número de fracturas encontradas."""
    batches = max(1, min(AUDIT_BATCHES, samples))
    step = samples // batches
    tasks = [(i, seed, step) for i in range(batches)]
    tasks[-1] = (batches - 1, seed, samples - step * (batches - 1))

    print(f"[*] INICIANDO AUDITORÍA DE LEYES (ConsList)")
    print(f"[*] Muestras: {samples} listas | Lotes: {batches}")
    print(f"[*] Criterio: estrategias DIRECTA y FOLD indistinguibles.")
    print("-" * 65)

    t0 = time.time()
    errs = 0
    if processes == 1:
        for res in map(audit_worker, tasks):
            errs += len(res)
    else:
        with Pool(processes or cpu_count()) as pool:
            for i, res in enumerate(pool.imap_unordered(audit_worker, tasks)):
                errs += len(res)
                if i % 4 == 0: print(f"   -> Progreso: Lotes {i} OK", flush=True)

    print("-" * 65)
    print(f"[*] Tiempo: {time.time()-t0:.2f}s")
    if errs == 0:
        print("\n🏆 LEYES VALIDADAS: CERO ERRORES.")
    else:
        print(f"\n❌ ERRORES DETECTADOS: {errs}")
    return errs


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    samples = int(argv[0]) if argv else AUDIT_SAMPLES
    return 1 if run_law_audit(samples) else 0


if __name__ == '__main__':
    sys.exit(main())
