import unittest
from dataclasses import dataclass, is_dataclass

from flexconf import InvalidConfigClassError, configclass

from helpers import as_config_class


def deserialize_count(value: str) -> int:
    return int(value)


def serialize_count(value: int) -> str:
    return str(value)


class TestConfigClassDecorator(unittest.TestCase):
    def test_metadata_is_attached(self) -> None:
        @configclass(
            field_name_mappings={"count": "count_value"},
            field_deserializers={"count": deserialize_count},
            field_serializers={"count": serialize_count},
        )
        @dataclass
        class ExampleConfig:
            count: int = 1

        spec = as_config_class(ExampleConfig).__config__

        self.assertEqual(spec.field_mappings, {"count": "count_value"})
        self.assertEqual(spec.field_deserializers, {"count": deserialize_count})
        self.assertEqual(spec.field_serializers, {"count": serialize_count})

    def test_bare_decorator_makes_dataclass(self) -> None:
        @configclass
        class ExampleConfig:
            count: int = 1

        self.assertTrue(is_dataclass(ExampleConfig))
        self.assertEqual(ExampleConfig(count=3).count, 3)
        self.assertEqual(as_config_class(ExampleConfig).__config__.field_mappings, {})

    def test_unknown_field_names_rejected(self) -> None:
        with self.assertRaises(InvalidConfigClassError):

            @configclass(field_name_mappings={"missing": "key"})
            class ExampleConfig:
                count: int = 1


if __name__ == "__main__":
    unittest.main()
