"""
LocomotionController — перемещение персонажа по WalkPath.

Состояния:
    IDLE     — пути нет
    WALKING  — персонаж идёт по пути
    ARRIVED  — переходное, в том же тике схлопывается в IDLE

Контроллер не владеет данными: путь, прогресс и текущий узел хранятся
в NavigationState, контроллер изменяет их через сеттеры.
"""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, Sequence
import numpy as np

from monument import log
from monument.sections import destination_node, look_direction

if TYPE_CHECKING:
    from monument.graph.graph import NavGraph
    from monument.scheduler import DeadlineScheduler
    from monument.settings import NavigationSettings
    from monument.state import NavigationState

DEFERRED_SWITCH_TAG = "deferred-section"

# Допуск сравнения накопленной дистанции с длиной сегмента
_EPS = 1e-9


class LocomotionState(Enum):
    IDLE = auto()
    WALKING = auto()
    ARRIVED = auto()


class LocomotionController:
    """Покадровое продвижение персонажа по активному пути."""

    def __init__(
        self,
        state: "NavigationState",
        graph: "NavGraph",
        scheduler: "DeadlineScheduler",
        settings: "NavigationSettings",
    ) -> None:
        self._state = state
        self._graph = graph
        self._scheduler = scheduler
        self._settings = settings

        self._mode: LocomotionState = LocomotionState.IDLE
        self._heading: float = 0.0

    @property
    def mode(self) -> LocomotionState:
        return self._mode

    @property
    def speed(self) -> float:
        return self._settings.walk_speed

    def begin(self, path: Sequence[str], target=None) -> bool:
        """
        Установить новый путь.

        Отменяет ожидающее отложенное переключение секции; target
        становится новой отложенной целью (или None).

        Returns:
            False если путь короче двух узлов или его первый узел
            неизвестен (персонаж остаётся на месте).
        """
        self._scheduler.cancel(DEFERRED_SWITCH_TAG)
        if len(path) < 2:
            return False
        if self._graph.get_node(path[0]) is None:
            log.warn(f"[Locomotion] path starts at unknown node '{path[0]}', ignored")
            return False
        self._state.set_character_node_id(path[0])
        self._state.set_walk_path(path)
        self._state.set_walk_target(target)
        self._state.set_is_walking(True)
        self._mode = LocomotionState.WALKING
        log.info(f"[Locomotion] walking {path[0]} → {path[-1]} ({len(path)} nodes)")
        return True

    def cancel_deferred(self) -> None:
        """Сбросить отложенную цель и ожидающее переключение секции."""
        self._scheduler.cancel(DEFERRED_SWITCH_TAG)
        self._state.set_walk_target(None)

    def stop(self) -> None:
        """Остановиться в текущем узле. Отложенная цель сбрасывается."""
        self.cancel_deferred()
        if self._state.walk_path is not None:
            log.info(f"[Locomotion] stopped at {self._state.character_node_id}")
        self._state.set_walk_path(None)
        self._state.set_is_walking(False)
        self._mode = LocomotionState.IDLE

    def update(self, dt: float) -> None:
        """Продвинуть персонажа на speed * dt вдоль пути."""
        state = self._state
        path = state.walk_path

        if path is None:
            self._mode = LocomotionState.IDLE
            return

        if len(path) < 2:
            self._arrive(path[0] if path else state.character_node_id)
            return

        self._mode = LocomotionState.WALKING
        state.set_is_walking(True)
        progress = state.walk_progress
        progress.distance += self.speed * max(0.0, dt)

        while True:
            seg = progress.segment
            start = self._graph.get_node(path[seg])
            if start is None:
                self._abort(state.character_node_id, path[seg])
                return
            end = self._graph.get_node(path[seg + 1])
            if end is None:
                self._abort(path[seg], path[seg + 1])
                return

            length = float(np.linalg.norm(end.position - start.position))
            self._update_heading(start.position, end.position)

            if progress.distance + _EPS < length:
                return

            if seg + 2 < len(path):
                # Переход на следующий сегмент
                progress.distance -= length
                progress.segment = seg + 1
                state.set_character_node_id(path[seg + 1])
                continue

            self._arrive(path[-1])
            return

    def position(self) -> Optional[np.ndarray]:
        """
        Позиция для рендера.

        Во время ходьбы — линейная интерполяция внутри текущего сегмента,
        иначе позиция текущего узла. None если узел не найден.
        """
        state = self._state
        path = state.walk_path
        if state.is_walking and path is not None and len(path) >= 2:
            seg = min(state.walk_progress.segment, len(path) - 2)
            start = self._graph.get_node(path[seg])
            end = self._graph.get_node(path[seg + 1])
            if start is not None and end is not None:
                length = float(np.linalg.norm(end.position - start.position))
                t = 0.0 if length <= _EPS else min(1.0, max(0.0, state.walk_progress.distance / length))
                return start.position + (end.position - start.position) * t

        node = self._graph.get_node(state.character_node_id)
        if node is None:
            return None
        return node.position.copy()

    def facing(self) -> float:
        """
        Поворот тела (atan2(dx, dz), +Z = 0).

        При ходьбе — направление движения; в покое — фиксированный взгляд
        наведённого или активного портала, иначе последнее направление.
        """
        if self._state.is_walking:
            return self._heading
        look = look_direction(self._state.hovered_section, self._state.current_section)
        if look is not None:
            return look.body_yaw
        return self._heading

    def remaining_distance(self) -> float:
        """Оставшаяся длина пути от текущей точки."""
        path = self._state.walk_path
        if path is None or len(path) < 2:
            return 0.0
        seg = self._state.walk_progress.segment
        rest = self._graph.path_length(path[seg:])
        return max(0.0, rest - self._state.walk_progress.distance)

    def _update_heading(self, start: np.ndarray, end: np.ndarray) -> None:
        dx = float(end[0] - start[0])
        dz = float(end[2] - start[2])
        if abs(dx) > 1e-6 or abs(dz) > 1e-6:
            self._heading = math.atan2(dx, dz)

    def _arrive(self, node_id: str) -> None:
        state = self._state
        state.set_character_node_id(node_id)
        state.set_walk_path(None)
        state.set_is_walking(False)
        self._mode = LocomotionState.ARRIVED
        log.info(f"[Locomotion] arrived at {node_id}")

        if state.walk_target is not None:
            self._scheduler.schedule(
                self._settings.arrival_delay,
                self._apply_deferred,
                tag=DEFERRED_SWITCH_TAG,
            )

        self._mode = LocomotionState.IDLE

    def _apply_deferred(self) -> None:
        state = self._state
        target = state.walk_target
        if target is None or state.is_walking:
            return
        state.set_walk_target(None)
        state.navigate_to(target)
        log.info(f"[Locomotion] deferred switch to section '{target.value}'")

    def _abort(self, last_resolved: str, missing: str) -> None:
        """
        Неизвестный узел посреди пути: остановиться в последнем известном.

        Отложенная секция применяется сразу, персонаж переносится
        к её узлу назначения, как при отсутствии пути.
        """
        state = self._state
        log.warn(f"[Locomotion] unknown node '{missing}', walk aborted at {last_resolved}")
        self._scheduler.cancel(DEFERRED_SWITCH_TAG)
        state.set_character_node_id(last_resolved)
        state.set_walk_path(None)
        state.set_is_walking(False)
        self._mode = LocomotionState.IDLE

        target = state.walk_target
        if target is None:
            return
        state.set_walk_target(None)
        dest = destination_node(target)
        if self._graph.get_node(dest) is None:
            log.warn(f"[Locomotion] destination '{dest}' unknown, section '{target.value}' dropped")
            return
        state.set_character_node_id(dest)
        state.navigate_to(target)
