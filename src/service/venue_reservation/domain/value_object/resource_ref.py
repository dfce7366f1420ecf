import attrs

from src.service.venue_reservation.domain.enum.resource_kind import ResourceKind


@attrs.define(frozen=True)
class ResourceRef:
    """Reserved resource: exactly one of chair or space, identified by kind + id"""

    kind: ResourceKind = attrs.field(validator=attrs.validators.instance_of(ResourceKind))
    id: int = attrs.field(validator=attrs.validators.instance_of(int))

    @classmethod
    def chair(cls, chair_id: int) -> 'ResourceRef':
        return cls(kind=ResourceKind.CHAIR, id=chair_id)

    @classmethod
    def space(cls, space_id: int) -> 'ResourceRef':
        return cls(kind=ResourceKind.SPACE, id=space_id)

    @property
    def is_chair(self) -> bool:
        return self.kind is ResourceKind.CHAIR

    @property
    def is_space(self) -> bool:
        return self.kind is ResourceKind.SPACE

    def __str__(self) -> str:
        return f'{self.kind.value.lower()}:{self.id}'
