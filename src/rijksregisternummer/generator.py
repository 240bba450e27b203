"""Random identification number generator."""

import logging
from datetime import date
from typing import Any

from faker import Faker

from rijksregisternummer import encoder
from rijksregisternummer.bands import to_category
from rijksregisternummer.config import GeneratorConfig
from rijksregisternummer.models import Category, Gender
from rijksregisternummer.validator import MAX_SEQUENCE_NUMBER, MIN_SEQUENCE_NUMBER

logger = logging.getLogger(__name__)


class RijksregisternummerGenerator:
    """Generate random valid identification numbers using Faker."""

    def __init__(self, config: GeneratorConfig | None = None, **kwargs: Any):
        """Initialize generator.

        Args:
            config: Generator configuration (default: GeneratorConfig())
            **kwargs: Default values for generate() (category, gender, birthday)
        """
        self.config = config or GeneratorConfig()
        self.defaults = kwargs
        self.fake = Faker(self.config.locale)
        if self.config.seed is not None:
            self.fake.seed_instance(self.config.seed)

    def random_birthday(self) -> date:
        """Return a random birthday inside the configured age window."""
        return self.fake.date_of_birth(
            minimum_age=self.config.minimum_age,
            maximum_age=self.config.maximum_age,
        )

    def random_sequence_number(self, gender: Gender | str | None = None) -> int:
        """Return a random sequence number, odd for men and even for women.

        Args:
            gender: Requested gender, None or '' for either
        """
        gender = Gender(gender) if gender else None
        if gender is None:
            return self.fake.random_int(min=MIN_SEQUENCE_NUMBER, max=MAX_SEQUENCE_NUMBER)

        start = MIN_SEQUENCE_NUMBER if gender is Gender.MALE else MIN_SEQUENCE_NUMBER + 1
        return self.fake.random_int(min=start, max=MAX_SEQUENCE_NUMBER, step=2)

    def generate(self, **kwargs: Any) -> str:
        """Generate a number in machine format.

        Args:
            category: Category (default: configured category)
            gender: 'M' or 'F' (default: random)
            birthday: Birthday in ISO 8601 format or a date (default: random)
            sequence_number: Sequence number (default: random for gender)

        Returns:
            Generated number
        """
        params = {**self.defaults, **kwargs}

        category = to_category(params.get("category", self.config.category))
        birthday = params.get("birthday") or self.random_birthday()
        sequence_number = params.get("sequence_number")
        if sequence_number is None:
            sequence_number = self.random_sequence_number(params.get("gender"))

        number = encoder.create(birthday, sequence_number, category)
        logger.debug("Generated %s (%s, %s)", number, birthday, category.name)
        return number

    def generate_batch(self, count: int, **kwargs: Any) -> list[str]:
        """Generate batch of numbers.

        Args:
            count: Number of numbers to generate
            **kwargs: Overrides passed to generate()

        Returns:
            List of generated numbers
        """
        return [self.generate(**kwargs) for _ in range(count)]
