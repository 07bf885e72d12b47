"""
Unit tests for the component layer
"""

import pytest

from l10n_repair.streamware import (
    Component,
    RegistryError,
    StreamwareURI,
    URIError,
    create_component,
    get_component,
    list_components,
    list_schemes,
    register,
    unregister,
)


class TestStreamwareURI:
    """Test URI parsing"""

    def test_basic_uri_parsing(self):
        uri = StreamwareURI("currency-sweep://format?marker=€&locale=de-DE")
        assert uri.scheme == "currency-sweep"
        assert uri.operation == "format"
        assert uri.get_param('marker') == "€"
        assert uri.get_param('locale') == "de-DE"

    def test_uri_param_types(self):
        uri = StreamwareURI("test://action?count=10&enabled=true&off=no")
        assert uri.get_param('count') == 10
        assert uri.get_param('enabled') is True
        assert uri.get_param('off') is False

    def test_percent_encoded_params(self):
        uri = StreamwareURI("currency-sweep://format?marker=%E2%82%AC")
        assert uri.get_param('marker') == "€"

    def test_uri_default_values(self):
        uri = StreamwareURI("text-scan://repair")
        assert uri.get_param('missing', 'default') == 'default'
        assert not uri.has_param('missing')

    def test_invalid_uri(self):
        with pytest.raises(URIError):
            StreamwareURI("just text")


class TestComponentRegistry:
    """Test component registration"""

    def test_builtin_components_registered(self):
        schemes = list_schemes()
        assert {"text-scan", "currency-sweep", "usability-fix"} <= set(schemes)
        assert any(c['class'] == "CurrencySweepComponent" for c in list_components())

    def test_register_and_unregister(self):
        @register("test-echo")
        class EchoComponent(Component):
            def process(self, data):
                return data

        try:
            component = create_component("test-echo://action?x=1", extra="ctx")
            assert isinstance(component, EchoComponent)
            assert component.context == {"extra": "ctx"}
            assert component.get_metadata()["params"] == {"x": 1}
        finally:
            assert unregister("test-echo") is True
        assert get_component("test-echo") is None

    def test_register_requires_component(self):
        with pytest.raises(RegistryError):
            @register("not-a-component")
            class Plain:
                pass

    def test_unknown_scheme(self):
        with pytest.raises(RegistryError):
            create_component("nope://x")
