import random
from datetime import timedelta

import pytest

from app.core.errors import InvalidArgument, NotFound
from app.models import COLLECTION_AD_CLICKS
from app.services import BannerService


@pytest.fixture
def service(store, clock):
    return BannerService(store, clock=clock, rng=random.Random(42))


def test_no_eligible_banner_returns_none(service, add_banner):
    add_banner("off", active=False)

    assert service.select_banner() is None


def test_single_eligible_banner_is_always_selected(service, add_banner):
    add_banner("only")
    add_banner("inactive", active=False)

    picks = {service.select_banner().id for _ in range(20)}

    assert picks == {"only"}


def test_window_is_inclusive_on_both_ends(service, add_banner, now):
    add_banner("starts-now", startDate=now, endDate=now + timedelta(days=1))
    add_banner("ends-now", startDate=now - timedelta(days=1), endDate=now)
    add_banner("future", startDate=now + timedelta(seconds=1), endDate=now + timedelta(days=2))
    add_banner("past", startDate=now - timedelta(days=2), endDate=now - timedelta(seconds=1))

    eligible = {banner.id for banner in service.list_eligible_banners()}

    assert eligible == {"starts-now", "ends-now"}


def test_city_and_position_filters(service, add_banner):
    add_banner("rosario-top")
    add_banner("rosario-side", position="sidebar")
    add_banner("cordoba-top", city="Cordoba")

    eligible = service.list_eligible_banners(city="Rosario", position="top")

    assert [banner.id for banner in eligible] == ["rosario-top"]


def test_rubro_filter_honours_all_tag(service, add_banner):
    add_banner("everyone", rubros=["all"])
    add_banner("plumbers", rubros=["plomeria"])
    add_banner("painters", rubros=["pintura"])
    add_banner("untagged", rubros=[])
    add_banner("no_rubros", rubros=None)

    eligible = {banner.id for banner in service.list_eligible_banners(rubro="plomeria")}
    unfiltered = {banner.id for banner in service.list_eligible_banners()}

    assert eligible == {"everyone", "plumbers", "no_rubros"}
    assert unfiltered == {"everyone", "plumbers", "painters", "untagged", "no_rubros"}


def test_selection_reaches_every_eligible_banner(service, add_banner):
    for banner_id in ("a", "b", "c"):
        add_banner(banner_id)

    picks = {service.select_banner().id for _ in range(200)}

    assert picks == {"a", "b", "c"}


def test_presentation_fields_are_preserved(service, add_banner):
    add_banner("promo", link="https://example.com/promo")

    banner = service.select_banner()

    assert banner.extra["link"] == "https://example.com/promo"
    assert banner.extra["imageUrl"].endswith("promo.png")


def test_track_click_records_event_with_default_city(service, add_banner, store, now):
    add_banner("b1")

    click_id = service.track_click("b1")

    click = store.get(COLLECTION_AD_CLICKS, click_id)
    assert click["bannerId"] == "b1"
    assert click["city"] == "Rosario"
    assert click["timestamp"] == now


def test_track_click_keeps_given_city(service, add_banner, store):
    add_banner("b1")

    click_id = service.track_click("b1", "Funes")

    assert store.get(COLLECTION_AD_CLICKS, click_id)["city"] == "Funes"


def test_track_click_on_unknown_banner_writes_nothing(service, store):
    with pytest.raises(NotFound):
        service.track_click("nonexistent-id")

    assert store.count(COLLECTION_AD_CLICKS) == 0


def test_track_click_requires_banner_id(service):
    with pytest.raises(InvalidArgument):
        service.track_click(None)
