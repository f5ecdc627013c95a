class TestProductCatalog:
    def test_list_is_public_and_sorted_by_name(self, client, products):
        response = client.get("/products")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Mug", "Notebook", "Pen"]

    def test_filter_by_category(self, client, products):
        response = client.get("/products", params={"category": "Stationery"})
        assert {p["name"] for p in response.json()} == {"Notebook", "Pen"}

    def test_category_is_exact_match(self, client, products):
        response = client.get("/products", params={"category": "Station"})
        assert response.json() == []

    def test_search_matches_description_case_insensitively(self, client, products):
        response = client.get("/products", params={"q": "coffee"})
        assert [p["name"] for p in response.json()] == ["Mug"]

    def test_search_and_category_combine(self, client, products):
        response = client.get("/products", params={"q": "pen", "category": "Home"})
        assert response.json() == []

    def test_categories(self, client, products):
        assert client.get("/products/categories").json() == ["Home", "Stationery"]

    def test_get_single_product(self, client, products):
        response = client.get(f"/products/{products['pen']}")
        assert response.status_code == 200
        assert response.json()["price"] == "5.50"

    def test_unknown_product(self, client, products):
        assert client.get("/products/does-not-exist").status_code == 404
