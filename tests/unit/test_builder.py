"""Tests for request building and payload serialization."""

import json
import xml.etree.ElementTree as ET
from decimal import Decimal

import pytest

from bigcommerce_legacy.builder import (
    XML_DECLARATION,
    build_headers,
    build_request,
    build_url,
    serialize_payload,
    to_xml,
)
from bigcommerce_legacy.config import BodyFormat
from bigcommerce_legacy.exceptions import RequestError, SerializationError
from bigcommerce_legacy.types.request import HttpMethod, RequestDescriptor

BASE_PATH = "https://store-abc123.mybigcommerce.com"


def parse_xml(text: str) -> ET.Element:
    return ET.fromstring(text.encode("utf-8"))


class TestBuildUrl:
    @pytest.mark.parametrize(
        "endpoint",
        ["/products", "/products?limit=1", "/categories/42", "//products/", "/"],
    )
    def test_appends_endpoint_verbatim(self, json_config, endpoint):
        assert build_url(json_config, endpoint) == BASE_PATH + "/api/v2" + endpoint


class TestBuildHeaders:
    def test_json_headers(self, json_config):
        headers = build_headers(json_config)
        assert headers == {
            "Authorization": f"Basic {json_config.encoded_credential}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def test_xml_headers(self, xml_config):
        headers = build_headers(xml_config)
        assert headers["Accept"] == "application/xml"
        assert headers["Content-Type"] == "application/xml"


class TestBuildRequest:
    def test_get_without_payload(self, json_config):
        request = build_request(json_config, HttpMethod.GET, "/products")

        assert isinstance(request, RequestDescriptor)
        assert request.method is HttpMethod.GET
        assert request.url == BASE_PATH + "/api/v2/products"
        assert request.body is None
        assert request.headers["Authorization"].startswith("Basic ")

    @pytest.mark.parametrize("method", ["put", "PUT", "Put"])
    def test_method_names_accepted(self, json_config, method):
        request = build_request(json_config, method, "/products/1")
        assert request.method is HttpMethod.PUT

    @pytest.mark.parametrize("method", ["PATCH", "", None, 42])
    def test_unknown_method_rejected(self, json_config, method):
        with pytest.raises(RequestError) as exc_info:
            build_request(json_config, method, "/products/1")
        assert exc_info.value.method == method

    def test_none_payload_means_no_body(self, json_config):
        request = build_request(json_config, HttpMethod.POST, "/products", None)
        assert request.body is None

    def test_json_body(self, json_config):
        payload = {"name": "Widget", "price": 9.5, "categories": [1, 2]}
        request = build_request(json_config, HttpMethod.POST, "/products", payload)
        assert json.loads(request.body) == payload

    def test_json_body_keeps_unicode(self, json_config):
        request = build_request(
            json_config, HttpMethod.PUT, "/products/1", {"name": "Café"}
        )
        assert "Café" in request.body

    def test_empty_mapping_is_still_a_body(self, json_config):
        request = build_request(json_config, HttpMethod.POST, "/products", {})
        assert request.body == "{}"

    def test_xml_body(self, xml_config):
        payload = {"product": {"inventory_level": 900}}
        request = build_request(xml_config, HttpMethod.PUT, "/products/1999", payload)

        root = parse_xml(request.body)
        assert root.tag == "product"
        assert root.find("inventory_level").text == "900"

    def test_unserializable_payload_raises(self, json_config):
        with pytest.raises(SerializationError) as exc_info:
            build_request(json_config, HttpMethod.POST, "/products", {"x": object()})
        assert exc_info.value.body_format == "json"
        assert isinstance(exc_info.value.__cause__, TypeError)


class TestJsonSerialization:
    def test_nan_is_rejected(self):
        with pytest.raises(SerializationError):
            serialize_payload({"price": float("nan")}, BodyFormat.JSON)

    def test_lone_surrogate_is_rejected(self):
        with pytest.raises(SerializationError) as exc_info:
            serialize_payload({"name": "\ud800"}, BodyFormat.JSON)
        assert exc_info.value.body_format == "json"
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    def test_lists_allowed_at_top_level(self):
        assert json.loads(serialize_payload([1, 2], BodyFormat.JSON)) == [1, 2]


class TestXmlSerialization:
    def test_single_key_becomes_root(self):
        text = to_xml({"product": {"inventory_level": 900}})
        assert text == (
            XML_DECLARATION
            + "\n<product><inventory_level>900</inventory_level></product>"
        )

    def test_declaration_first(self):
        assert to_xml({"product": {"id": 1}}).startswith("<?xml version=")

    def test_multiple_keys_wrapped_in_root(self):
        root = parse_xml(to_xml({"name": "Widget", "price": Decimal("9.50")}))
        assert root.tag == "root"
        assert root.find("name").text == "Widget"
        assert root.find("price").text == "9.50"

    def test_empty_mapping(self):
        root = parse_xml(to_xml({}))
        assert root.tag == "root"
        assert len(root) == 0

    def test_nested_mappings(self):
        payload = {"product": {"custom_url": {"url": "/widget/", "is_customized": True}}}
        root = parse_xml(to_xml(payload))
        assert root.find("custom_url/url").text == "/widget/"
        assert root.find("custom_url/is_customized").text == "true"

    def test_list_repeats_element(self):
        root = parse_xml(to_xml({"product": {"categories": [18, 23]}}))
        assert [e.text for e in root.findall("categories")] == ["18", "23"]

    def test_single_key_list_is_wrapped(self):
        root = parse_xml(to_xml({"product": [{"id": 1}, {"id": 2}]}))
        assert root.tag == "root"
        assert [p.find("id").text for p in root.findall("product")] == ["1", "2"]

    def test_scalar_conversions(self):
        root = parse_xml(
            to_xml({"product": {"is_visible": False, "description": None, "weight": 1.5}})
        )
        assert root.find("is_visible").text == "false"
        assert root.find("description").text is None
        assert root.find("weight").text == "1.5"

    def test_lone_surrogate_is_rejected(self):
        with pytest.raises(SerializationError) as exc_info:
            serialize_payload({"product": {"name": "\ud800"}}, BodyFormat.XML)
        assert exc_info.value.body_format == "xml"

    def test_text_is_escaped(self):
        root = parse_xml(to_xml({"product": {"name": "Nuts & <Bolts>"}}))
        assert root.find("name").text == "Nuts & <Bolts>"

    @pytest.mark.parametrize(
        "payload",
        [
            [1, 2],
            "product",
            None,
            {"product": {"bad name": 1}},
            {"product": {"1st": 1}},
            {1: "x"},
            {"product": {"tags": [[1, 2]]}},
            {"product": {"obj": object()}},
            {"product": {"name": "bell\x07"}},
            {"product": {"weight": float("nan")}},
            {"product": {"weight": float("inf")}},
            {"product": {"price": Decimal("-Infinity")}},
        ],
    )
    def test_unrepresentable_payloads(self, payload):
        with pytest.raises(SerializationError) as exc_info:
            serialize_payload(payload, BodyFormat.XML)
        assert exc_info.value.body_format == "xml"
