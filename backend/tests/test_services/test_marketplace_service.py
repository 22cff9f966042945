"""
Unit tests for MarketplaceService (aggregation views)

Author: Namma City
Date: 2025-10-17
"""
from namma_city.services.marketplace_service import MarketplaceListing, UNKNOWN_SELLER


class TestSellerListing:

    def test_delegates_to_catalog_store(self, marketplace, product_repo, acme_id, globex_id):
        product_repo.create(acme_id, {"name": "Banana", "price": 45, "inventory": 100})
        product_repo.create(globex_id, {"name": "Mango", "price": 80, "inventory": 5})

        listing = marketplace.seller_listing(acme_id)

        assert [p.name for p in listing] == ["Banana"]


class TestMarketplaceListing:
    """Test the public marketplace join"""

    def test_product_without_partner(self, marketplace, product_repo, acme_id):
        """No delivery partner means null name and fee"""
        product = product_repo.create(acme_id, {"name": "Banana", "price": 45, "inventory": 100})

        listings = marketplace.marketplace_listing()

        assert len(listings) == 1
        entry = listings[0]
        assert isinstance(entry, MarketplaceListing)
        assert entry.id == product.id
        assert entry.seller_name == "Acme"
        assert entry.price_inr == 45
        assert entry.delivery_partner_id is None
        assert entry.delivery_partner_name is None
        assert entry.delivery_fee_inr is None

    def test_product_with_partner_shows_name_and_base_fee(self, marketplace, product_repo, acme_id):
        product_repo.create(acme_id, {
            "name": "Banana", "price": 45, "inventory": 100, "delivery_partner_id": "loadshare",
        })

        entry = marketplace.marketplace_listing()[0]

        assert entry.delivery_partner_id == "loadshare"
        assert entry.delivery_partner_name == "Loadshare"
        assert entry.delivery_fee_inr == 30

    def test_spans_all_sellers_in_store_order(self, marketplace, product_repo, acme_id, globex_id):
        product_repo.create(acme_id, {"name": "A1", "price": 1, "inventory": 1})
        product_repo.create(globex_id, {"name": "G1", "price": 2, "inventory": 1})
        product_repo.create(acme_id, {"name": "A2", "price": 3, "inventory": 1})

        listings = marketplace.marketplace_listing()

        assert [(e.name, e.seller_name) for e in listings] == [
            ("A1", "Acme"), ("G1", "Globex"), ("A2", "Acme"),
        ]

    def test_unknown_seller_falls_back(self, marketplace, product_repo):
        """A product whose seller cannot be resolved shows 'Unknown'"""
        product_repo.create("ghost-seller", {"name": "Orphan", "price": 1, "inventory": 1})

        assert marketplace.marketplace_listing()[0].seller_name == UNKNOWN_SELLER

    def test_is_read_only(self, marketplace, product_repo, acme_id):
        product_repo.create(acme_id, {"name": "Banana", "price": 45, "inventory": 100})
        before = product_repo.find_all()

        marketplace.marketplace_listing()
        marketplace.catalog_with_delivery_options()

        assert product_repo.find_all() == before

    def test_to_dict_wire_names(self, marketplace, product_repo, acme_id):
        product_repo.create(acme_id, {"name": "Banana", "price": 45, "inventory": 100})

        data = marketplace.marketplace_listing()[0].to_dict()

        assert set(data) == {
            "id", "name", "description", "priceINR", "inventory", "imageUrl",
            "sellerName", "deliveryPartnerId", "deliveryPartnerName", "deliveryFeeINR",
        }
        assert data["sellerName"] == "Acme"
        assert data["deliveryFeeINR"] is None

    def test_empty_catalog(self, marketplace):
        assert marketplace.marketplace_listing() == []


class TestCatalogWithDeliveryOptions:

    def test_every_provider_offered_at_flat_fee(self, marketplace, product_repo, logistics, acme_id):
        product_repo.create(acme_id, {"name": "Banana", "price": 45, "inventory": 100})

        entries = marketplace.catalog_with_delivery_options()

        assert len(entries) == 1
        data = entries[0].to_dict()
        assert data["name"] == "Banana"
        assert data["sellerId"] == acme_id
        assert data["sellerName"] == "Acme"
        assert [o["id"] for o in data["deliveryOptions"]] == [p.id for p in logistics.get_all()]
        assert {o["deliveryFeeINR"] for o in data["deliveryOptions"]} == {50}
