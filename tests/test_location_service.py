from unittest.mock import MagicMock

import pytest

from app.core.exceptions import LocationNotFoundError, LocationValidationError
from app.models.location import Location
from app.services.location import LocationService, location_service, parse_location_id
from tests.conftest import SHOP, OTHER_SHOP


ALL_FLAGS_ON = {
    "showAddress": "on",
    "showCity": "on",
    "showProvince": "on",
    "showPostalCode": "on",
    "showCountry": "on",
    "offersPickup": "on",
    "offersDelivery": "on",
}


class TestValidateAndNormalize:
    def test_trims_text_and_blanks_become_none(self):
        fields = location_service.validate_and_normalize({
            "name": "  Main St ",
            "address": "\t123 Market St\n",
            "apartment": "   ",
            "city": " Utrecht ",
            "zipcode": "",
        })

        assert fields.name == "Main St"
        assert fields.address == "123 Market St"
        assert fields.apartment is None
        assert fields.city == "Utrecht"
        assert fields.zipcode is None
        assert fields.province is None
        assert fields.country is None

    @pytest.mark.parametrize("submission", [
        {"address": "123 Market St"},
        {"name": "Main St"},
        {"name": "   ", "address": "123 Market St"},
        {"name": "Main St", "address": " \n "},
        {},
    ])
    def test_requires_name_and_address(self, submission):
        with pytest.raises(LocationValidationError) as exc_info:
            location_service.validate_and_normalize(submission)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "name and address are required"

    def test_flags_are_true_only_for_checkbox_sentinel(self):
        fields = location_service.validate_and_normalize({
            "name": "A",
            "address": "B",
            "showAddress": "on",
            "showCity": "true",
            "offersPickup": "on",
            "offersDelivery": "",
        })

        assert fields.show_address is True
        assert fields.show_city is False
        assert fields.show_province is False
        assert fields.show_postal_code is False
        assert fields.show_country is False
        assert fields.offers_pickup is True
        assert fields.offers_delivery is False


class TestParseLocationId:
    @pytest.mark.parametrize("raw, expected", [
        ("5", 5), (" 12 ", 12), (7, 7), ("2147483647", 2147483647),
    ])
    def test_accepts_positive_integers(self, raw, expected):
        assert parse_location_id(raw) == expected

    @pytest.mark.parametrize("raw", [
        None, "", "abc", "1.5", "-3", "0", 0, True,
        "\u00b2", "1\u00b9", "\u0661",
        "2147483648", "99999999999999999999999", 2**31,
    ])
    def test_rejects_everything_else(self, raw):
        with pytest.raises(LocationValidationError) as exc_info:
            parse_location_id(raw)

        assert exc_info.value.detail == "invalid id"


class TestCreate:
    def test_defaults_apply_when_no_flags_submitted(self, test_db):
        created = location_service.create(
            test_db, SHOP, {"name": "Main St", "address": "123 Market St"}
        )

        location = location_service.get_owned(test_db, SHOP, created.id)
        assert location.shop_domain == SHOP
        assert location.show_address is True
        assert location.show_city is True
        assert location.show_province is True
        assert location.show_postal_code is True
        assert location.show_country is True
        assert location.offers_pickup is False
        assert location.offers_delivery is False
        assert location.active is True

    def test_omitted_flags_are_false_once_any_flag_is_submitted(self, test_db):
        created = location_service.create(
            test_db, "s1", {"name": "A", "address": "B", "showAddress": "on"}
        )

        assert created.show_address is True
        assert created.show_city is False
        assert created.show_country is False
        assert created.offers_pickup is False

    def test_all_checkboxes_unticked_starts_fully_visible(self, test_db):
        created = location_service.create(
            test_db, SHOP, {"name": "A", "address": "B", "apartment": ""}
        )

        assert created.show_address is True
        assert created.show_country is True
        assert created.offers_pickup is False

    def test_blank_optional_fields_are_stored_as_null(self, test_db):
        created = location_service.create(test_db, SHOP, {
            "name": "A",
            "address": "B",
            "apartment": "  ",
            "city": "",
            "zipcode": " ",
            "province": "",
            "country": "   ",
        })
        test_db.expire_all()

        stored = test_db.get(Location, created.id)
        for field in ("apartment", "city", "zipcode", "province", "country"):
            assert getattr(stored, field) is None

    def test_validation_failure_does_not_write(self):
        crud = MagicMock()
        service = LocationService(crud=crud)

        with pytest.raises(LocationValidationError):
            service.create(MagicMock(), SHOP, {"name": "", "address": "B"})

        crud.create.assert_not_called()


class TestGetOwned:
    def test_other_shops_location_is_not_found(self, test_db, make_location):
        foreign = make_location(shop_domain=OTHER_SHOP)

        with pytest.raises(LocationNotFoundError) as exc_info:
            location_service.get_owned(test_db, SHOP, foreign.id)

        assert exc_info.value.status_code == 404

    def test_missing_and_foreign_ids_look_the_same(self, test_db, make_location):
        foreign = make_location(shop_domain=OTHER_SHOP)

        with pytest.raises(LocationNotFoundError) as missing:
            location_service.get_owned(test_db, SHOP, 9999)
        with pytest.raises(LocationNotFoundError) as not_owned:
            location_service.get_owned(test_db, SHOP, foreign.id)

        assert missing.value.detail == not_owned.value.detail

    def test_invalid_id_does_not_touch_storage(self):
        crud = MagicMock()
        service = LocationService(crud=crud)

        with pytest.raises(LocationValidationError):
            service.get_owned(MagicMock(), SHOP, "abc")

        crud.get.assert_not_called()


class TestUpdate:
    def test_full_overwrite_turns_omitted_flags_off(self, test_db, make_location):
        existing = make_location(city="Utrecht", offers_pickup=True)

        updated = location_service.update(test_db, SHOP, str(existing.id), {
            "name": " Renamed ",
            "address": "1 New Rd",
            "offersDelivery": "on",
        })

        assert updated.name == "Renamed"
        assert updated.address == "1 New Rd"
        assert updated.city is None
        assert updated.show_address is False
        assert updated.show_city is False
        assert updated.offers_pickup is False
        assert updated.offers_delivery is True

    def test_blank_name_leaves_record_unchanged(self, test_db, make_location):
        existing = make_location(name="Keep", address="Old Rd", city="Utrecht")

        with pytest.raises(LocationValidationError):
            location_service.update(test_db, SHOP, existing.id, {"name": "", "address": "X"})

        test_db.expire_all()
        stored = location_service.get_owned(test_db, SHOP, existing.id)
        assert stored.name == "Keep"
        assert stored.address == "Old Rd"
        assert stored.city == "Utrecht"
        assert stored.show_address is True

    def test_validation_failure_does_not_write(self):
        crud = MagicMock()
        crud.get.return_value = MagicMock(id=5)
        service = LocationService(crud=crud)

        with pytest.raises(LocationValidationError):
            service.update(MagicMock(), "s1", 5, {"name": "", "address": "X"})

        crud.update.assert_not_called()

    def test_not_found_is_reported_before_validation(self):
        crud = MagicMock()
        crud.get.return_value = None
        service = LocationService(crud=crud)

        with pytest.raises(LocationNotFoundError):
            service.update(MagicMock(), SHOP, 5, {"name": "", "address": ""})

        crud.update.assert_not_called()

    def test_cannot_update_another_shops_location(self, test_db, make_location):
        foreign = make_location(shop_domain=OTHER_SHOP, name="Theirs")

        with pytest.raises(LocationNotFoundError):
            location_service.update(test_db, SHOP, foreign.id, {"name": "Mine", "address": "X"})

        test_db.expire_all()
        assert location_service.get_owned(test_db, OTHER_SHOP, foreign.id).name == "Theirs"

    def test_row_deleted_before_write_is_not_found(self):
        crud = MagicMock()
        crud.get.return_value = MagicMock(id=5)
        crud.update.return_value = False
        service = LocationService(crud=crud)

        with pytest.raises(LocationNotFoundError):
            service.update(MagicMock(), SHOP, 5, {"name": "A", "address": "B"})

        crud.update.assert_called_once()


class TestDelete:
    def test_second_delete_is_not_found(self, test_db, make_location):
        existing = make_location()

        location_service.delete(test_db, SHOP, existing.id)

        with pytest.raises(LocationNotFoundError):
            location_service.delete(test_db, SHOP, existing.id)

    def test_cannot_delete_another_shops_location(self, test_db, make_location):
        foreign = make_location(shop_domain=OTHER_SHOP)

        with pytest.raises(LocationNotFoundError):
            location_service.delete(test_db, SHOP, foreign.id)

        assert location_service.get_owned(test_db, OTHER_SHOP, foreign.id).id == foreign.id


class TestList:
    def test_empty_shop_returns_empty_list(self, test_db):
        assert location_service.list(test_db, SHOP) == []

    def test_newest_first_and_scoped_to_shop(self, test_db):
        first = location_service.create(test_db, "s1", {"name": "First", "address": "1 Rd"})
        second = location_service.create(test_db, "s1", {"name": "Second", "address": "2 Rd"})
        location_service.create(test_db, "s2", {"name": "Other", "address": "3 Rd"})

        locations = location_service.list(test_db, "s1")

        assert [loc.id for loc in locations] == [second.id, first.id]

    def test_list_active_filters_inactive_and_sorts_by_name(self, test_db, make_location):
        make_location(name="Zuid")
        make_location(name="Closed", active=False)
        make_location(name="Amsterdam")
        make_location(shop_domain=OTHER_SHOP, name="Elsewhere")

        names = [loc.name for loc in location_service.list_active(test_db, SHOP)]

        assert names == ["Amsterdam", "Zuid"]
