"""
MSB entry kinds, one module per param.

Importing this package registers every entry class with the param it
belongs to, so params can pick the class from a type code while reading.
"""
from .models import (
    ModelType, Model,
    MapPieceModel, ObjectModel, EnemyModel, PlayerModel, CollisionModel,
)
from .events import (
    EventType, Event,
    TreasureEvent, GeneratorEvent, ObjActEvent, EnvironmentEvent, PatrolInfoEvent,
)
from .regions import RegionType, Region, PointRegion, SphereRegion, CylinderRegion, BoxRegion
from .routes import RouteType, Route, MufflingPortalLink, MufflingBoxLink
from .parts import (
    PartType, Part,
    MapPiecePart, ObjectPart, EnemyPart, PlayerPart, CollisionPart, ConnectCollisionPart,
)

__all__ = [
    'ModelType', 'Model',
    'MapPieceModel', 'ObjectModel', 'EnemyModel', 'PlayerModel', 'CollisionModel',
    'EventType', 'Event',
    'TreasureEvent', 'GeneratorEvent', 'ObjActEvent', 'EnvironmentEvent', 'PatrolInfoEvent',
    'RegionType', 'Region', 'PointRegion', 'SphereRegion', 'CylinderRegion', 'BoxRegion',
    'RouteType', 'Route', 'MufflingPortalLink', 'MufflingBoxLink',
    'PartType', 'Part',
    'MapPiecePart', 'ObjectPart', 'EnemyPart', 'PlayerPart', 'CollisionPart', 'ConnectCollisionPart',
]
