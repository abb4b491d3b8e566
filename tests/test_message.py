"""Tests for message reflection."""

from types import SimpleNamespace

from protoscrape.cache import is_reflected
from protoscrape.config import ReflectConfig
from protoscrape.message import reflect_message, reflect_message_fields
from protoscrape.resolve import resolve_message
from protoscrape.types import Field, ReflectedMessageType
from sample_protos import EchoReply, EchoRequest, Meta, Root


class Unformatted:
    """Assignments spread over lines do not fit the template."""

    @classmethod
    def fromObject(cls, obj):
        result = cls()
        result.inner = (
            Root.echo.v1.Meta.fromObject(obj["inner"])
        )
        return result


class Duplicated:
    @classmethod
    def fromObject(cls, obj):
        result = cls()
        result.value = Root.echo.v1.Meta.fromObject(obj["a"])
        result.value = Root.common.Trace.fromObject(obj["b"])
        return result


class Collections:
    """Repeated and map element assignments are not field declarations."""

    @classmethod
    def fromObject(cls, obj):
        result = cls()
        result.items = []
        for i, item in enumerate(obj["items"]):
            result.items[i] = Root.echo.v1.Meta.fromObject(item)
        for key in obj["by_name"]:
            result.by_name[key] = Root.common.Trace.fromObject(obj["by_name"][key])
        result.trace = Root.common.Trace.fromObject(obj["trace"])
        return result


class TestReflectMessageFields:
    """Scraping fromObject for nested-message assignments."""

    def test_fields_in_source_order(self):
        fields = reflect_message_fields(EchoRequest)
        assert fields == [
            Field(name="meta", id=0, type="echo.v1.Meta"),
            Field(name="trace", id=1, type="common.Trace"),
        ]

    def test_scalar_fields_not_discovered(self):
        assert reflect_message_fields(Meta) == []

    def test_single_nested_field(self):
        fields = reflect_message_fields(EchoReply)
        assert [f.name for f in fields] == ["trace"]
        assert fields[0].id == 0

    def test_no_from_object(self):
        assert reflect_message_fields(object) == []

    def test_unexpected_formatting_yields_nothing(self):
        assert reflect_message_fields(Unformatted) == []

    def test_repeated_and_map_fields_not_discovered(self):
        fields = reflect_message_fields(Collections)
        assert fields == [Field(name="trace", id=0, type="common.Trace")]


class TestReflectMessage:
    """Full reflection with namespace and caching."""

    def test_annotates_metadata(self):
        reflected = reflect_message(EchoRequest, Root)
        assert isinstance(reflected, ReflectedMessageType)
        assert reflected.type is EchoRequest
        assert reflected.name == "EchoRequest"
        assert reflected.ns == "echo.v1"
        assert reflected.full_name == "echo.v1.EchoRequest"
        assert reflected.source == "scrape"
        assert list(reflected.fields) == ["meta", "trace"]
        assert reflected.fields["trace"].type == "common.Trace"

    def test_idempotent(self):
        first = reflect_message(EchoRequest, Root)
        second = reflect_message(EchoRequest, Root)
        assert second is first
        assert second.fields_array == [
            Field(name="meta", id=0, type="echo.v1.Meta"),
            Field(name="trace", id=1, type="common.Trace"),
        ]

    def test_cached_result_ignores_later_root(self):
        first = reflect_message(EchoRequest, Root)
        again = reflect_message(EchoRequest, {})
        assert again is first
        assert again.ns == "echo.v1"

    def test_does_not_mutate_type(self):
        reflect_message(EchoRequest, Root)
        assert is_reflected(EchoRequest)
        assert not hasattr(EchoRequest, "fields_array")
        assert not hasattr(EchoRequest, "ns")

    def test_zero_fields(self):
        reflected = reflect_message(Meta, Root)
        assert reflected.fields_array == []
        assert reflected.fields == {}

    def test_unregistered_type(self):
        reflected = reflect_message(EchoRequest, {})
        assert reflected.ns == ""
        assert reflected.full_name == "EchoRequest"
        assert len(reflected.fields_array) == 2

    def test_attribute_registry_namespace(self):
        root = {"pkg": SimpleNamespace(M=EchoRequest)}
        reflected = reflect_message(resolve_message("pkg.M", root), root)
        assert reflected.ns == "pkg"

    def test_duplicate_names_keep_both_entries(self):
        reflected = reflect_message(Duplicated, Root)
        assert [f.id for f in reflected.fields_array] == [0, 1]
        assert reflected.fields["value"].type == "common.Trace"

    def test_to_dict(self):
        data = reflect_message(EchoReply, Root).to_dict()
        assert data == {
            "name": "EchoReply",
            "ns": "echo.v1",
            "source": "scrape",
            "fields": [{"name": "trace", "id": 0, "type": "common.Trace"}],
        }


class Described:
    DESCRIPTOR = SimpleNamespace(
        fields=[
            SimpleNamespace(name="id", type=3, message_type=None, enum_type=None),
            SimpleNamespace(
                name="meta",
                type=11,
                message_type=SimpleNamespace(full_name="echo.v1.Meta"),
                enum_type=None,
            ),
        ]
    )

    @classmethod
    def fromObject(cls, obj):
        result = cls()
        result.meta = Root.echo.v1.Meta.fromObject(obj["meta"])
        return result


class TestDescriptorPreference:
    """DESCRIPTOR wins over scraping unless disabled."""

    def test_descriptor_used_when_preferred(self):
        reflected = reflect_message(Described, {"x": {"Described": Described}})
        assert reflected.source == "descriptor"
        assert reflected.ns == "x"
        assert reflected.fields_array == [
            Field(name="id", id=0, type="int64"),
            Field(name="meta", id=1, type="echo.v1.Meta"),
        ]

    def test_scrape_only_config(self):
        reflected = reflect_message(
            Described, Root, config=ReflectConfig.scrape_only()
        )
        assert reflected.source == "scrape"
        assert reflected.fields_array == [
            Field(name="meta", id=0, type="echo.v1.Meta"),
        ]

    def test_env_disables_descriptor(self, monkeypatch):
        monkeypatch.setenv("PROTOSCRAPE_PREFER_DESCRIPTOR", "false")
        reflected = reflect_message(Described, Root)
        assert reflected.source == "scrape"

    def test_malformed_descriptor_falls_back(self):
        class Broken(Described):
            DESCRIPTOR = SimpleNamespace(fields=[SimpleNamespace(type=9)])

        reflected = reflect_message(Broken, Root)
        assert reflected.source == "scrape"
        assert [f.name for f in reflected.fields_array] == ["meta"]
