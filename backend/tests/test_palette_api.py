"""
API integration tests for the /v1 palette endpoints.
"""

import base64
import re


class TestSchemesEndpoint:
    """Test /v1/schemes."""
    
    def test_hex_base(self, test_client):
        response = test_client.get("/v1/schemes", params={"base": "#FF0000"})
        assert response.status_code == 200
        data = response.json()
        
        assert data["input_format"] == "hex"
        assert data["base"]["hex"] == "#FF0000"
        assert data["complementary"][0]["hex"] == "#00FFFF"
        assert [c["hex"] for c in data["triadic"]] == ["#0000FF", "#00FF00"]
        assert len(data["monochrome"]) == 4
        assert data["split"][0]["var_name"] == "--color-split-1"
        assert data["request_id"].startswith("pal-")
    
    def test_unrecognized_base_falls_back(self, test_client):
        data = test_client.get("/v1/schemes", params={"base": "banana"}).json()
        assert data["input_format"] == "fallback"
        assert data["base"]["hex"] == "#1AA4FF"
    
    def test_default_base(self, test_client):
        data = test_client.get("/v1/schemes").json()
        assert data["base"]["hex"] == "#5EB0E5"
    
    def test_scheme_swatch(self, test_client):
        data = test_client.get("/v1/schemes", params={"base": "#1AA4FF", "include_swatch": "true"}).json()
        assert base64.b64decode(data["swatch_png_b64"]).startswith(b"\x89PNG")
        
        data = test_client.get("/v1/schemes", params={"base": "#1AA4FF"}).json()
        assert data["swatch_png_b64"] is None


class TestPaletteEndpoint:
    """Test /v1/palette and its exports."""
    
    def test_triadic_filter(self, test_client):
        response = test_client.get("/v1/palette", params={"base": "#1AA4FF", "filter": "triadic"})
        assert response.status_code == 200
        data = response.json()
        
        assert data["filter"] == "triadic"
        assert len(data["items"]) == 3
        assert data["items"][0]["var_name"] == "--color-base"
        assert data["items"][0]["text_color"] == "#0f172a"
        assert data["strip"] == [data["items"][0]["hex"], data["items"][-1]["hex"]]
        assert data["swatch_png_b64"] is None
    
    def test_all_filter_capped(self, test_client):
        data = test_client.get("/v1/palette", params={"base": "rgb(255,0,0)", "filter": "all"}).json()
        hexes = [item["hex"] for item in data["items"]]
        assert len(hexes) == 12
        assert len(set(hexes)) == 12
    
    def test_default_filter(self, test_client):
        data = test_client.get("/v1/palette").json()
        assert data["filter"] == "split"
        assert data["base_hex"] == "#5EB0E5"
    
    def test_invalid_filter(self, test_client):
        response = test_client.get("/v1/palette", params={"filter": "tetradic"})
        assert response.status_code == 422
    
    def test_with_swatch(self, test_client):
        data = test_client.get(
            "/v1/palette",
            params={"base": "#1AA4FF", "filter": "split", "include_swatch": "true", "chip_size": 20}
        ).json()
        png = base64.b64decode(data["swatch_png_b64"])
        assert png.startswith(b"\x89PNG")
        assert data["swatch_meta"]["total_colors"] == 3
        assert data["swatch_meta"]["chip_size_px"] == 20
    
    def test_css_export(self, test_client):
        response = test_client.get("/v1/palette/css", params={"base": "#FF0000", "filter": "triadic"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == (
            ":root {\n"
            "  --color-base: #FF0000;\n"
            "  --color-01: #0000FF;\n"
            "  --color-02: #00FF00;\n"
            "}"
        )
    
    def test_hex_export(self, test_client):
        response = test_client.get("/v1/palette/hexes", params={"base": "#FF0000", "filter": "triadic"})
        assert response.text == "#FF0000, #0000FF, #00FF00"


class TestColorUtilityEndpoints:
    """Test /v1/parse, /v1/contrast, /v1/random and /v1/metrics."""
    
    def test_parse(self, test_client):
        data = test_client.get("/v1/parse", params={"color": "rgb(50%, 50%, 50%)"}).json()
        assert data["format"] == "rgb"
        assert data["rgb"] == [127, 127, 127]
        assert data["hex"] == "#7F7F7F"
        assert data["hsl"]["s"] == 0
    
    def test_parse_requires_color(self, test_client):
        assert test_client.get("/v1/parse").status_code == 422
    
    def test_overflowing_numbers_fall_back(self, test_client):
        data = test_client.get("/v1/parse", params={"color": "rgb(1e400, 0, 0)"}).json()
        assert data["format"] == "fallback"
        assert data["hex"] == "#1AA4FF"
        
        response = test_client.get("/v1/palette/hexes", params={"base": "hsl(0, 1e400%, 50%)", "filter": "complementary"})
        assert response.status_code == 200
        assert response.text.startswith("#1AA4FF, ")
    
    def test_contrast(self, test_client):
        assert test_client.get("/v1/contrast", params={"color": "#FFFFFF"}).json()["text_color"] == "#0f172a"
        data = test_client.get("/v1/contrast", params={"color": "#000000"}).json()
        assert data["text_color"] == "#FFFFFF"
        assert data["luma"] == 0
    
    def test_random(self, test_client):
        data = test_client.get("/v1/random").json()
        assert re.fullmatch(r"#[0-9A-F]{6}", data["hex"])
    
    def test_metrics_count_requests(self, test_client):
        test_client.get("/v1/palette", params={"base": "#FF0000", "filter": "split"})
        test_client.get("/v1/palette", params={"base": "nope", "filter": "all"})
        
        data = test_client.get("/v1/metrics").json()
        counters = data["counters"]
        assert counters["palette_requests_total_palette"] == 2
        assert counters["color_parsed_total_fallback"] == 1
        assert counters["palette_filter_used_total_all"] == 1
        assert "palette_duration_ms" in data["timing_stats"]
