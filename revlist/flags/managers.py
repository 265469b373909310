"""Managers for revlist.flags.models."""

from __future__ import annotations

from django.contrib.contenttypes.models import ContentType
from django.db.models import QuerySet


class FlagQuerySet(QuerySet):
    """A queryset for looking up flags."""

    def owned_by(self, users):
        """Return flags owned by any of the given users.

        Args:
            users (list of django.contrib.auth.models.User):
                The owners of the flags.

        Returns:
            FlagQuerySet:
            The filtered queryset.
        """
        return self.filter(owner__in=users)

    def for_objects(self, objs):
        """Return flags placed on any of the given objects.

        The objects may be of mixed model types.

        Args:
            objs (list of django.db.models.Model):
                The flagged objects.

        Returns:
            FlagQuerySet:
            The filtered queryset.
        """
        objs_by_type = {}

        for obj in objs:
            content_type = ContentType.objects.get_for_model(obj)
            objs_by_type.setdefault(content_type.pk, []).append(obj.pk)

        if not objs_by_type:
            return self.none()

        q = None

        for content_type_id, obj_ids in objs_by_type.items():
            type_q = self.filter(content_type=content_type_id,
                                 object_id__in=obj_ids)

            if q is None:
                q = type_q
            else:
                q = q | type_q

        return q
