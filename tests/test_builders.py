"""Message, criteria and config builders sharing one Builder."""

import logging

import pytest

from unifiedpush_sender import Builder, InvalidFormat
from unifiedpush_sender.builders.message import fix_version, parse_badge


class TestSharedState:

    def test_same_instance_per_role(self):
        builder = Builder()
        assert builder.message() is builder.message()
        assert builder.criteria() is builder.criteria()
        assert builder.config() is builder.config()

    def test_pivots_return_shared_instances(self):
        builder = Builder()
        message = builder.message()
        assert message.criteria() is builder.criteria()
        assert message.config() is builder.config()
        assert builder.criteria().message() is message
        assert builder.config().message() is message
        assert builder.config().criteria() is builder.criteria()
        assert message.builder is builder

    def test_state_from_both_chains_is_visible(self):
        builder = Builder()
        builder.message().alert("Hello")
        builder.criteria().aliases("mike").message().sound("default")

        built = builder.build()
        assert built.message == {"alert": "Hello", "sound": "default"}
        assert built.aliases == ["mike"]

    def test_build_from_any_sub_builder(self):
        builder = Builder()
        builder.message().alert("Hello")
        assert builder.criteria().build() == builder.build()
        assert builder.config().build() == builder.message().build()

    def test_untouched_roles_stay_absent(self):
        built = Builder().message().alert("Hello").build()
        assert built.to_payload() == {"message": {"alert": "Hello"}}

    def test_creation_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="unifiedpush_sender.builders.state"):
            builder = Builder()
            builder.message()
            builder.message()
        created = [r for r in caplog.records if r.getMessage() == "Creating message builder"]
        assert len(created) == 1


class TestMessageBuilder:

    def test_badge_parsed(self):
        assert Builder().message().badge("1").attributes["badge"] == 1

    @pytest.mark.parametrize("value,expected", [("+3", 3), ("-2", -2), ("007", 7), (5, 5)])
    def test_badge_integer_forms(self, value, expected):
        assert parse_badge(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "1.5", " 1", "1_000", "²", True, 1.0, None])
    def test_badge_rejected(self, value):
        with pytest.raises(InvalidFormat) as exc_info:
            parse_badge(value)
        assert exc_info.value.code == "invalid_format"
        assert exc_info.value.details == {"field": "badge", "value": value}

    def test_rejected_badge_leaves_previous_value(self):
        message = Builder().message().badge("4")
        with pytest.raises(InvalidFormat):
            message.badge("four")
        assert message.attributes["badge"] == 4

    def test_content_available_only_true(self):
        message = Builder().message()
        assert "content-available" not in message.attributes
        message.content_available()
        assert message.attributes["content-available"] is True

    def test_action_category(self):
        assert Builder().message().action_category("reply").attributes == {"action-category": "reply"}

    @pytest.mark.parametrize("version,expected", [
        ("1", "version=1"),
        ("version=1", "version=1"),
        ("", "version="),
        ("v=2", "version=v=2"),
    ])
    def test_fix_version(self, version, expected):
        assert fix_version(version) == expected

    def test_simple_push_none_clears(self):
        message = Builder().message().simple_push("3")
        assert message.attributes == {"simple-push": "version=3"}
        message.simple_push(None)
        assert "simple-push" not in message.attributes

    def test_user_data_entries(self):
        message = Builder().message().user_data("key", "value").user_data("other", "x")
        assert message.attributes["user-data"] == {"key": "value", "other": "x"}

    def test_user_data_last_write_wins(self):
        message = Builder().message().user_data("key", "a").user_data("key", "b")
        assert message.attributes["user-data"] == {"key": "b"}

    def test_replace_user_data_discards_entries(self):
        message = Builder().message().user_data("old", "x").replace_user_data({"new": "y"})
        assert message.attributes["user-data"] == {"new": "y"}

    def test_replace_user_data_copies_mapping(self):
        source = {"a": "1"}
        message = Builder().message().replace_user_data(source)
        source["b"] = "2"
        assert message.attributes["user-data"] == {"a": "1"}

    def test_user_data_read_is_pure(self):
        message = Builder().message().user_data("a", "1")
        first = message.attributes
        message.user_data("b", "2")
        assert first["user-data"] == {"a": "1"}
        assert message.attributes["user-data"] == {"a": "1", "b": "2"}

    def test_empty_user_data_omitted(self):
        message = Builder().message().alert("hi").replace_user_data({})
        assert message.attributes == {"alert": "hi"}

    def test_merge_attributes_keeps_single_key_attributes(self):
        message = (
            Builder().message()
            .attribute("foo-key", "foo")
            .merge_attributes({"bar-key": "bar", "baz-key": "baz"})
        )
        assert message.attributes == {"foo-key": "foo", "bar-key": "bar", "baz-key": "baz"}

    def test_merge_attributes_overwrites_per_key(self):
        message = Builder().message().alert("old").merge_attributes({"alert": "new"})
        assert message.attributes == {"alert": "new"}


class TestCriteriaBuilder:

    def test_variadic_and_list_forms_match(self):
        variadic = Builder().criteria().aliases("mike", "john").variants("a", "b").device_type("iPad")
        listed = Builder().criteria().aliases(["mike", "john"]).variants(("a", "b")).device_type(["iPad"])
        assert variadic.attributes == listed.attributes
        assert variadic.attributes["alias"] == ["mike", "john"]
        assert variadic.attributes["deviceType"] == ["iPad"]

    def test_single_string_is_one_value(self):
        assert Builder().criteria().aliases("mike").attributes == {"alias": ["mike"]}

    def test_order_kept_for_lists(self):
        criteria = Builder().criteria().variants("b", "a", "b")
        assert criteria.attributes["variants"] == ["b", "a", "b"]

    def test_categories_collapse_duplicates(self):
        criteria = Builder().criteria().categories("sports", "sports", "world cup")
        assert criteria.attributes["categories"] == {"sports", "world cup"}

    def test_setting_again_replaces(self):
        criteria = Builder().criteria().aliases("mike").aliases("john")
        assert criteria.attributes["alias"] == ["john"]

    def test_empty_values_accepted(self):
        criteria = Builder().criteria().aliases().variants([]).categories(set())
        assert criteria.attributes == {"alias": [], "variants": [], "categories": set()}

    def test_input_list_is_copied(self):
        aliases = ["mike"]
        criteria = Builder().criteria().aliases(aliases)
        aliases.append("john")
        assert criteria.attributes["alias"] == ["mike"]


class TestConfigBuilder:

    @pytest.mark.parametrize("seconds", [3600, 0, -1])
    def test_time_to_live_unvalidated(self, seconds):
        assert Builder().config().time_to_live(seconds).attributes == {"ttl": seconds}

    def test_attributes_is_a_copy(self):
        config = Builder().config().time_to_live(10)
        config.attributes["ttl"] = 20
        assert config.attributes == {"ttl": 10}
