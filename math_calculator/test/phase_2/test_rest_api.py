"""
REST API Endpoint Tests
Test Phase 2: REST API Endpoint Testing
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from math_calculator.api.main import app

pytestmark = pytest.mark.api


class TestHtmlEndpoints:
    """Test the HTML form and results pages"""

    @pytest.fixture(autouse=True)
    def setup_client(self):
        """Setup test client"""
        self.client = TestClient(app)

    def test_index_page(self):
        """Test / serves the form"""
        response = self.client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'name="number"' in response.text
        for identifier in ["factorial", "palindrome", "fibonacci", "prime", "cubeRoot"]:
            assert f'value="{identifier}"' in response.text

    def test_static_stylesheet(self):
        """Test static assets are mounted"""
        response = self.client.get("/frontend/style.css")
        assert response.status_code == 200

    def test_health(self):
        """Test health endpoint"""
        response = self.client.get("/health")
        assert response.json() == {"status": "ok"}

    def test_calculate_results_page(self):
        """Test form submission renders one block per operation"""
        response = self.client.post(
            "/calculate",
            data={"number": "5", "operations": ["factorial", "fibonacci", "cubeRoot"]},
        )

        assert response.status_code == 200
        body = response.text
        assert "Mathematical Operations Results" in body
        assert "Input Number: <strong>5</strong>" in body
        assert "Factorial of 5 = 120" in body
        assert "Fibonacci series with 5 terms: [0, 1, 1, 2, 3]" in body
        assert "Cube root of 5 = 1.709976" in body

    def test_calculate_unknown_operation_is_isolated(self):
        """Test unsupported operation shows an error entry next to other results"""
        response = self.client.post(
            "/calculate", data={"number": "17", "operations": ["prime", "bogus"]}
        )

        assert response.status_code == 200
        assert "The number 17 is a prime number." in response.text
        assert "Error: Unsupported operation: bogus" in response.text

    @pytest.mark.parametrize(
        "data,reason",
        [
            ({"operations": ["prime"]}, "Number is required"),
            ({"number": "", "operations": ["prime"]}, "Number is required"),
            ({"number": "abc", "operations": ["prime"]}, "Invalid number format"),
            ({"number": "-3", "operations": ["prime"]}, "Number must be positive"),
            ({"number": "5"}, "At least one operation must be selected"),
        ],
    )
    def test_calculate_validation_error_page(self, data, reason):
        """Test invalid input renders the error page"""
        response = self.client.post("/calculate", data=data)

        assert response.status_code == 400
        assert "<h1>Error</h1>" in response.text
        assert reason in response.text

    def test_calculate_very_long_number_page(self):
        """Test a huge digit string renders the error page instead of a 500"""
        response = self.client.post(
            "/calculate", data={"number": "9" * 5000, "operations": ["prime"]}
        )

        assert response.status_code == 400
        assert "Number must not exceed 1000" in response.text

    def test_calculate_escapes_identifiers(self):
        """Test raw identifiers are HTML-escaped in the results page"""
        response = self.client.post(
            "/calculate", data={"number": "3", "operations": ["<script>x</script>"]}
        )

        assert response.status_code == 200
        assert "<script>x</script>" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_calculate_internal_error(self):
        """Test unexpected failure becomes a 500"""
        with patch(
            "math_calculator.api.main.calculate", side_effect=RuntimeError("boom")
        ):
            response = self.client.post(
                "/calculate", data={"number": "3", "operations": ["prime"]}
            )

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal error"


class TestJsonEndpoints:
    """Test the JSON API"""

    @pytest.fixture(autouse=True)
    def setup_client(self):
        """Setup test client"""
        self.client = TestClient(app)

    def test_list_operations(self):
        """Test /api/operations"""
        response = self.client.get("/api/operations")

        assert response.status_code == 200
        assert response.json() == [
            {"id": "factorial", "title": "Factorial"},
            {"id": "palindrome", "title": "Palindrome Check"},
            {"id": "fibonacci", "title": "Fibonacci Series"},
            {"id": "prime", "title": "Prime Number Check"},
            {"id": "cubeRoot", "title": "Cube Root"},
        ]

    def test_calculate_structured_results(self):
        """Test /api/calculate returns structured payloads"""
        payload = {
            "number": "8",
            "operations": ["cubeRoot", "fibonacci", "palindrome", "prime", "factorial"],
        }
        response = self.client.post("/api/calculate", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["number"] == 8
        results = {r["operation"]: r for r in data["results"]}

        assert results["factorial"]["value"] == "40320"
        assert results["fibonacci"]["terms"] == [0, 1, 1, 2, 3, 5, 8, 13]
        assert results["palindrome"]["verdict"] is True
        assert results["prime"]["verdict"] is False
        assert results["cubeRoot"]["value"] == "2.000000"
        assert all(r["success"] for r in data["results"])

    def test_calculate_accepts_integer_number(self):
        """Test number may be sent as a JSON integer"""
        response = self.client.post(
            "/api/calculate", json={"number": 121, "operations": ["palindrome"]}
        )

        assert response.status_code == 200
        result = response.json()["results"][0]
        assert result["message"] == "The number 121 is a palindrome."

    def test_calculate_integer_above_limit(self, settings_env):
        """Test the limit applies to JSON integers and follows settings"""
        response = self.client.post(
            "/api/calculate", json={"number": 1221, "operations": ["palindrome"]}
        )
        assert response.status_code == 400
        assert response.json() == {"detail": "Number must not exceed 1000"}

        settings_env(MAX_NUMBER=5000)
        response = self.client.post(
            "/api/calculate", json={"number": 1221, "operations": ["palindrome"]}
        )
        assert response.status_code == 200
        assert response.json()["results"][0]["verdict"] is True

    @pytest.mark.parametrize("number", [5.5, 5.0, True, False, [5], {"n": 5}])
    def test_calculate_non_integer_json_number(self, number):
        """Test non-integer JSON values reach validation and get a 400"""
        response = self.client.post(
            "/api/calculate", json={"number": number, "operations": ["prime"]}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid number format"}

    def test_calculate_very_long_number(self):
        """Test a huge digit string is rejected, not a server error"""
        response = self.client.post(
            "/api/calculate", json={"number": "9" * 5000, "operations": ["prime"]}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Number must not exceed 1000"}

    def test_calculate_unknown_operation(self):
        """Test unsupported operation is an error entry, not a request failure"""
        response = self.client.post(
            "/api/calculate", json={"number": "4", "operations": ["bogus", "prime"]}
        )

        assert response.status_code == 200
        results = response.json()["results"]
        assert [r["operation"] for r in results] == ["prime", "bogus"]
        assert results[1]["success"] is False
        assert results[1]["message"] == "Unsupported operation: bogus"

    @pytest.mark.parametrize(
        "payload,reason",
        [
            ({"operations": ["prime"]}, "Number is required"),
            ({"number": "abc", "operations": ["prime"]}, "Invalid number format"),
            ({"number": 0, "operations": ["prime"]}, "Number must be positive"),
            ({"number": "5", "operations": []}, "At least one operation must be selected"),
            ({"number": "100000", "operations": ["factorial"]}, "Number must not exceed 1000"),
        ],
    )
    def test_calculate_validation_errors(self, payload, reason):
        """Test invalid input returns 400 with the reason"""
        response = self.client.post("/api/calculate", json=payload)

        assert response.status_code == 400
        assert response.json() == {"detail": reason}


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
