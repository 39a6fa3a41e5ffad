"""
Monument - ядро навигации по сцене монумента.

Основные модули:
- graph - навигационный граф, правило мостов, A* поиск пути
- state - хранилище состояния навигации (секции, кольцо, ходьба)
- locomotion - продвижение персонажа по пути
- navigator - согласование секций и перемещения
- ring - перетаскивание и защёлкивание кольца
- world - сборка всех компонентов и покадровый цикл
"""

from .graph import NavGraph, find_path, is_bridge_open
from .sections import Section
from .settings import NavigationSettings
from .state import NavigationState
from .world import MonumentWorld

__version__ = '0.1.0'

__all__ = [
    'MonumentWorld',
    'NavGraph',
    'NavigationSettings',
    'NavigationState',
    'Section',
    'find_path',
    'is_bridge_open',
]
