# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/services/sync.py

Planificación de la sincronización de colecciones hijas (imágenes,
repositorios) contra una lista objetivo.

Cada elemento objetivo es:
- con id   → referencia a un hijo existente: se conserva (y se actualiza `order`)
- sin id   → hijo nuevo: se crea
Todo hijo actual cuyo id no aparece en la lista objetivo se elimina.
Los ids objetivo que no pertenecen al padre se ignoran.

plan_sync() es puro: solo particiona. Aplicar el plan (borrar, crear,
guardar archivos) es responsabilidad de cada servicio de hijos.

Autor: Equipo Showcase
Fecha: 2026-10-08
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, List, Optional, Protocol, Sequence, Tuple, TypeVar


class Identified(Protocol):
    id: Optional[int]


class Ordered(Protocol):
    id: Optional[int]
    order: Optional[int]


C = TypeVar("C", bound=Identified)  # hijo persistido
T = TypeVar("T", bound=Ordered)     # elemento objetivo


@dataclass
class SyncPlan(Generic[C, T]):
    to_delete: List[C] = field(default_factory=list)
    to_keep: List[Tuple[C, T]] = field(default_factory=list)
    to_create: List[T] = field(default_factory=list)


def plan_sync(current: Iterable[C], targets: Sequence[T]) -> SyncPlan[C, T]:
    """
    Particiona los hijos actuales y la lista objetivo.

    Si un id aparece repetido en la lista objetivo gana la última aparición.
    """
    target_by_id = {t.id: t for t in targets if t.id is not None}
    plan: SyncPlan[C, T] = SyncPlan()
    for child in current:
        target = target_by_id.get(child.id)
        if target is None:
            plan.to_delete.append(child)
        else:
            plan.to_keep.append((child, target))
    plan.to_create = [t for t in targets if t.id is None]
    return plan


def apply_order(kept: Iterable[Tuple[Ordered, Ordered]]) -> int:
    """Copia `order` del objetivo al hijo conservado cuando viene informado."""
    changed = 0
    for child, target in kept:
        if target.order is not None and child.order != target.order:
            child.order = target.order
            changed += 1
    return changed


__all__ = ["SyncPlan", "plan_sync", "apply_order"]

# Fin del archivo backend/showcase/modules/projects/services/sync.py
