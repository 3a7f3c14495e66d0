from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from ..common.logging import get_logger
from ..core.enums import CourseType
from .base import AttendanceComponentProps, AttendanceVariant
from .hybrid_variant import HybridVariant
from .onsite_variant import OnsiteVariant
from .remote_variant import RemoteVariant

logger = get_logger(__name__)

RenderBehavior = AttendanceVariant


@dataclass
class VariantFactory:
    """Factory Pattern: choose the attendance view variant for a course type."""

    variants: dict[CourseType, type[AttendanceVariant]] = field(
        default_factory=lambda: {
            CourseType.ONSITE: OnsiteVariant,
            CourseType.REMOTE: RemoteVariant,
            CourseType.HYBRID: HybridVariant,
        }
    )
    default: CourseType = CourseType.ONSITE

    def resolve(self, course_type: CourseType | str | None) -> CourseType:
        if isinstance(course_type, CourseType):
            return course_type
        try:
            return CourseType(str(course_type).strip().lower())
        except ValueError:
            logger.debug("Unknown course type %r, using %s view", course_type, self.default.value)
            return self.default

    def create(
        self,
        course_type: CourseType | str | None,
        props: AttendanceComponentProps,
        *,
        rng: Optional[random.Random] = None,
    ) -> RenderBehavior:
        variant_cls = self.variants.get(self.resolve(course_type), self.variants[self.default])
        return variant_cls(props, rng=rng)


def select_component(
    course_type: CourseType | str | None,
    props: AttendanceComponentProps,
    *,
    rng: Optional[random.Random] = None,
) -> RenderBehavior:
    """Attendance view behavior for ``course_type``; unknown types get the onsite view."""
    return VariantFactory().create(course_type, props, rng=rng)
