#!/usr/bin/env python3
"""
Generate synthetic sample JSON documents for interface generation.
Goal: reproducible documents that exercise every kind of field the generator handles.
"""

import json
import random
import string
from pathlib import Path
from typing import Any, Callable, Dict, List
from datetime import datetime, timedelta
import uuid


DEFAULT_OUTPUT_FILE = Path(__file__).parent.parent / "tests" / "examples" / "samples.json"

KEY_WORDS = ['user', 'name', 'geo', 'position', 'item', 'order', 'created', 'at', 'id', 'status', 'tag', 'address']


class SampleDocumentGenerator:
    """Generate diverse JSON documents shaped like API responses."""

    def __init__(self, seed: int = 42):
        """Initialize with a seed for reproducibility."""
        self.seed = seed
        self.rng = random.Random(seed)
        self.generation_count = 0

    def generate_documents(self, count: int = 100, depth: int = 3, width: int = 5) -> List[Dict[str, Any]]:
        """Generate multiple diverse documents."""
        documents = []
        for i in range(count):
            # Vary randomness slightly for each document
            self.rng.seed(self.seed + i)
            self.generation_count = i
            documents.append(self.generate_document(depth=depth, width=width))
        return documents

    def generate_document(self, depth: int = 3, width: int = 5) -> Dict[str, Any]:
        """Generate a single object with `width` fields and nesting up to `depth` levels."""
        obj = {}

        for _ in range(width):
            key = self._unique_key(obj)
            obj[key] = self._generate_value(depth - 1, width)

        return obj

    def generate_primitive_document(self, width: int = 5) -> Dict[str, Any]:
        """Generate an object whose fields are all strings, numbers or booleans."""
        obj = {}
        for _ in range(width):
            obj[self._unique_key(obj)] = self._generate_primitive()
        return obj

    def _generate_value(self, depth: int, width: int) -> Any:
        """Generate a field value, only nesting while depth remains."""
        generators: List[Callable[[], Any]] = [
            self._generate_primitive,
            self._generate_primitive,
            lambda: None,
            self._generate_primitive_array,
            lambda: [],
        ]

        if depth > 0:
            child_width = max(1, width - 1)
            generators += [
                lambda: self.generate_document(depth, child_width),
                lambda: [self.generate_document(depth, child_width) for _ in range(self.rng.randint(1, 3))],
            ]

        return self.rng.choice(generators)()

    def _generate_primitive(self) -> Any:
        """Generate a random string, number or boolean."""
        generators = [
            lambda: self.rng.randint(-1000, 1000),
            lambda: round(self.rng.uniform(-1000, 1000), 2),
            lambda: self._generate_random_string(5, 15),
            lambda: self.rng.choice([True, False]),
            self._generate_datetime,
            self._generate_email,
            lambda: str(uuid.UUID(int=self.rng.getrandbits(128))),
        ]
        return self.rng.choice(generators)()

    def _generate_primitive_array(self) -> List[Any]:
        """Generate a non-empty array of one primitive type."""
        element = self.rng.choice([
            lambda: self.rng.randint(0, 100),
            lambda: self._generate_random_string(3, 8),
            lambda: self.rng.choice([True, False]),
        ])
        return [element() for _ in range(self.rng.randint(1, 5))]

    def _unique_key(self, obj: Dict[str, Any]) -> str:
        """Generate a key not yet used in obj, in kebab, snake or camel case."""
        while True:
            words = self.rng.sample(KEY_WORDS, self.rng.randint(1, 3))
            style = self.rng.random()
            if style < 0.4:
                key = '-'.join(words)
            elif style < 0.6:
                key = '_'.join(words)
            else:
                key = words[0] + ''.join(w.capitalize() for w in words[1:])
            if key not in obj:
                return key

    def _generate_random_string(self, min_len: int, max_len: int) -> str:
        """Generate a random string."""
        length = self.rng.randint(min_len, max_len)

        # Vary string type
        choice = self.rng.random()
        if choice < 0.3:
            # Words
            words = ['lorem', 'ipsum', 'dolor', 'sit', 'amet', 'consectetur', 'adipiscing']
            return ' '.join(self.rng.choices(words, k=min(5, length // 5 + 1)))[:length]
        elif choice < 0.6:
            # Alphanumeric
            return ''.join(self.rng.choices(string.ascii_letters + string.digits, k=length))
        else:
            # Letters only
            return ''.join(self.rng.choices(string.ascii_lowercase, k=length))

    def _generate_datetime(self) -> str:
        """Generate an ISO datetime string."""
        base = datetime(2020, 1, 1)
        random_dt = base + timedelta(days=self.rng.randint(0, 1825), hours=self.rng.randint(0, 23))
        return random_dt.isoformat() + "Z"

    def _generate_email(self) -> str:
        """Generate a random email."""
        names = ['alice', 'bob', 'charlie', 'diana', 'eve', 'frank']
        domains = ['example.com', 'test.org', 'demo.net', 'sample.io']
        return f"{self.rng.choice(names)}{self.rng.randint(1,999)}@{self.rng.choice(domains)}"


def main(output_file: Path = DEFAULT_OUTPUT_FILE, count: int = 100):
    """Generate sample documents and save them as one JSON file."""
    generator = SampleDocumentGenerator()

    print(f"Generating {count} sample documents...\n")

    documents = generator.generate_documents(count=count)

    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w") as f:
        json.dump(documents, f, indent=2)

    print(f"✓ Generated {len(documents)} documents -> {output_file}")


if __name__ == "__main__":
    main()
