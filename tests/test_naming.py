"""Unit tests for identifier derivation."""

from pdum.gapi.generator.naming import (
    class_name,
    method_name,
    module_name,
    pascal_case,
    primary_name,
    safe_identifier,
    snake_case,
)


def test_snake_case():
    assert snake_case("reportStateAndNotification") == "report_state_and_notification"
    assert snake_case("agentUserId") == "agent_user_id"
    assert snake_case("V2GetKeyStringResponse") == "v2_get_key_string_response"
    assert snake_case("$.xgafv") == "xgafv"


def test_snake_case_escapes_keywords():
    assert snake_case("from") == "from_"
    assert snake_case("async") == "async_"


def test_safe_identifier():
    assert safe_identifier("123abc") == "n123abc"
    assert safe_identifier("class") == "class_"
    assert safe_identifier("a-b.c") == "a_b_c"


def test_pascal_case():
    assert pascal_case("device_info") == "DeviceInfo"
    assert pascal_case("deviceInfo") == "DeviceInfo"


def test_primary_name_follows_title_capitalization():
    assert primary_name("homegraph", "HomeGraph API".split()) == "HomeGraph"
    assert primary_name("apikeys", "API Keys API".split()) == "APIKeys"
    assert primary_name("doubleclickbidmanager", "DoubleClick Bid Manager API".split()) == (
        "DoubleClickBidManager"
    )
    assert primary_name("analyticsadmin", "Google Analytics Admin API".split()) == "AnalyticsAdmin"


def test_primary_name_falls_back_to_api_name():
    assert primary_name("tagmanager", "Something Else".split()) == "Tagmanager"


def test_method_name_drops_service_prefix():
    assert method_name("homegraph.agentUsers.delete") == "agent_users_delete"
    assert method_name("apikeys.projects.locations.keys.getKeyString") == (
        "projects_locations_keys_get_key_string"
    )


def test_module_name():
    assert module_name("homegraph", "v1") == "homegraph_v1"
    assert module_name("admin", "reports_v1") == "admin_reports_v1"
    assert module_name("compute", "v1.beta") == "compute_v1_beta"


def test_class_name():
    assert class_name("V2Key") == "V2Key"
    assert class_name("GoogleCloudV1.Thing") == "GoogleCloudV1Thing"
    assert class_name("3dModel") == "Schema3dModel"
    assert class_name("device") == "Device"
