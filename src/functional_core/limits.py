"""
src/functional_core/limits.py
Constantes de operación (no hay capa de configuración externa).
"""

# Elementos mostrados por repr() antes de truncar con "..."
REPR_LIMIT = 10

# =============================================================================
# AUDITORÍA DE LEYES (src/list_laws.py)
# =============================================================================
AUDIT_SAMPLES    = 200      # Listas aleatorias por ejecución
AUDIT_MAX_LENGTH = 12       # Longitud máxima de cada lista generada
AUDIT_SEED       = 0x5EED   # Reproducibilidad
AUDIT_BATCHES    = 8        # Lotes repartidos entre procesos

# Longitud usada por las pruebas de estrés (sin RecursionError)
STRESS_LENGTH = 10_000
