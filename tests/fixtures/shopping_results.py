"""SerpAPI 응답 테스트 자산

- 단순 dict만 보관
- pytest fixture 선언하지 않음
"""

MULTI_SOURCE_ITEM = {
    "position": 1,
    "title": "Lenovo IdeaPad Slim 3 15IAN8",
    "product_id": "11223344556677",
    "product_link": "https://www.google.com/shopping/product/11223344556677?gl=sk",
    "source": "Alza.sk",
    "price": "€399.00",
    "extracted_price": 399.0,
    "multiple_sources": True,
    "number_of_comparisons": "8+",
}

SINGLE_SOURCE_ITEM = {
    "position": 2,
    "title": "HP 250 G9 notebook",
    "product_id": "99887766554433",
    "product_link": "https://www.google.com/shopping/product/99887766554433?gl=sk",
    "source": "Datart.sk",
    "price": "€449.90",
    "extracted_price": 449.9,
    "multiple_sources": False,
}

NO_FLAG_ITEM = {
    "position": 3,
    "title": "ASUS Vivobook 15",
    "product_id": "55544433322211",
    "source": "Nay.sk",
    "price": "€529.00",
}

SHOPPING_PAYLOAD = {
    "search_metadata": {"status": "Success"},
    "search_parameters": {"engine": "google_shopping", "gl": "sk", "hl": "en", "q": "notebook"},
    "shopping_results": [MULTI_SOURCE_ITEM, SINGLE_SOURCE_ITEM],
}

PRODUCT_DETAILS_PAYLOAD = {
    "product_results": {
        "product_id": "11223344556677",
        "title": "Lenovo IdeaPad Slim 3 15IAN8",
        "prices": ["€399.00", "€419.00"],
    },
    "sellers_results": {
        "online_sellers": [
            {"name": "Alza.sk", "link": "https://www.alza.sk/p1", "base_price": "€399.00",
             "additional_price": {"shipping": "€2.99"}, "total_price": "€401.99"},
        ]
    },
}

ITEM_WITH_SELLERS = {
    "title": "Lenovo IdeaPad Slim 3 15IAN8",
    "product_id": 11223344556677,
    "product_link": "https://www.google.com/shopping/product/11223344556677",
    "price": "€399.00 - €419.00",
    "multiple_sources": True,
    "sellers": [
        {"name": "Alza.sk", "link": "https://www.alza.sk/p1", "base_price": "€399.00",
         "shipping": "€2.99", "total_price": "€401.99"},
        {"name": "Datart.sk", "link": "https://www.datart.sk/p1", "base_price": "€419.00",
         "shipping": "Free", "total_price": "€419.00"},
    ],
}
