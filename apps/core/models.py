from django.db import models


class TimeStampedModel(models.Model):
    """
    Abstract base model that provides created_at / updated_at timestamps.
    """

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        abstract = True
