"""Factory Boy setup for test data generation."""

from __future__ import annotations

import factory
from faker import Faker

faker = Faker()
Faker.seed(1234)


class DataclassFactory(factory.Factory):
    """Base factory for the frozen domain dataclasses."""

    class Meta:
        abstract = True
