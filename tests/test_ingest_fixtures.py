import logging
from datetime import datetime, timedelta, timezone

import pytest

from footydash.config import CrestTable
from footydash.errors import MalformedPayload
from footydash.ingest import extract_h2h_odds, format_kickoff, normalize_fixtures, normalize_match_stats
from footydash.models import RawEvent

from tests.payloads import event, h2h_bookmaker, sample_odds


KICKOFF = datetime(2024, 8, 17, 14, 0, tzinfo=timezone.utc)


def test_next_ten_fixtures_in_kickoff_order():
    fixtures = normalize_fixtures(sample_odds())

    assert len(fixtures) == 10
    assert [f.home_team for f in fixtures[:3]] == ["Mystery FC", "Arsenal", "Brentford"]
    dates = [f.raw_date for f in fixtures]
    assert dates == sorted(dates)
    assert all(earlier < later for earlier, later in zip(dates, dates[1:]))


def test_limit_is_configurable():
    assert len(normalize_fixtures(sample_odds(), limit=2)) == 2


def test_first_bookmaker_only():
    arsenal = normalize_fixtures(sample_odds())[1]

    assert arsenal.bookmaker == "Sky Bet"
    assert arsenal.home_odds == pytest.approx(1.8)
    assert arsenal.away_odds == pytest.approx(4.2)
    assert arsenal.draw_odds == pytest.approx(3.6)


def test_no_bookmakers_means_no_odds():
    mystery = normalize_fixtures(sample_odds())[0]

    assert (mystery.home_odds, mystery.draw_odds, mystery.away_odds) == (None, None, None)
    assert mystery.bookmaker is None


def test_missing_h2h_market_keeps_bookmaker_name():
    brentford = normalize_fixtures(sample_odds())[2]

    assert (brentford.home_odds, brentford.draw_odds, brentford.away_odds) == (None, None, None)
    assert brentford.bookmaker == "Paddy Power"


def test_odds_are_copied_from_outcomes():
    raw = RawEvent.model_validate(
        event("Arsenal", "Chelsea", KICKOFF,
              [h2h_bookmaker("Sky Bet", {"Chelsea": 4.25, "Arsenal": 1.83, "Tie": 3.5})])
    )

    assert extract_h2h_odds(raw) == (1.83, 3.5, 4.25, "Sky Bet")


def test_h2h_market_found_after_other_markets():
    bookmaker = h2h_bookmaker("Betfair", {"Arsenal": 2.1, "Chelsea": 3.4, "Draw": 3.2})
    totals = {"key": "totals", "outcomes": [{"name": "Over", "price": 1.9, "point": 2.5}]}
    bookmaker["markets"].insert(0, totals)
    raw = RawEvent.model_validate(event("Arsenal", "Chelsea", KICKOFF, [bookmaker]))

    assert extract_h2h_odds(raw) == (2.1, 3.2, 3.4, "Betfair")


def test_crests_resolved_from_injected_table(caplog):
    crests = CrestTable(ids={"Fulham": "54"}, url_template="https://crests.example/{crest_id}.png")

    with caplog.at_level(logging.WARNING):
        mystery = normalize_fixtures(sample_odds(), crests=crests)[0]

    assert mystery.home_crest is None
    assert mystery.away_crest == "https://crests.example/54.png"
    assert "Mystery FC" in caplog.text


def test_default_crest_urls():
    arsenal = normalize_fixtures(sample_odds())[1]

    assert arsenal.home_crest == "https://resources.premierleague.com/premierleague/badges/t3.svg"
    assert arsenal.away_crest == "https://resources.premierleague.com/premierleague/badges/t8.svg"


def test_fixed_labels():
    fixture = normalize_fixtures(sample_odds())[0]

    assert fixture.status == "Not Started"
    assert fixture.competition == "Premier League"
    assert fixture.matchday is None
    assert fixture.venue is None


def test_display_date_is_formatted_in_zone():
    assert format_kickoff(KICKOFF) == "Sat 17 Aug, 14:00 UTC"

    plus_one = timezone(timedelta(hours=1), "BST")
    assert format_kickoff(KICKOFF, plus_one) == "Sat 17 Aug, 15:00 BST"


def test_raw_date_not_display_string_drives_order():
    # "Fri" sorts before "Sat" as text but this fixture is a week later.
    later = KICKOFF + timedelta(days=6)
    payload = [event("Arsenal", "Chelsea", later), event("Everton", "Fulham", KICKOFF)]

    fixtures = normalize_fixtures(payload)

    assert [f.home_team for f in fixtures] == ["Everton", "Arsenal"]
    assert fixtures[1].match_date.startswith("Fri")


def test_offset_timestamps_compare_as_instants():
    payload = [
        {"home_team": "Arsenal", "away_team": "Chelsea", "commence_time": "2024-08-17T15:30:00+02:00"},
        {"home_team": "Everton", "away_team": "Fulham", "commence_time": "2024-08-17T14:00:00Z"},
    ]

    fixtures = normalize_fixtures(payload)

    assert [f.home_team for f in fixtures] == ["Arsenal", "Everton"]


@pytest.mark.parametrize("payload", [[], {"message": "quota exceeded"}, None, "oops"])
def test_empty_or_non_list_payload_yields_nothing(payload):
    assert normalize_fixtures(payload) == []


def test_bad_event_is_malformed():
    payload = sample_odds() + [{"home_team": "Arsenal"}]

    with pytest.raises(MalformedPayload):
        normalize_fixtures(payload)


def test_match_stats_keep_three_bookmakers():
    books = [h2h_bookmaker(f"Book {i}", {"Arsenal": 2.0, "Chelsea": 3.0, "Draw": 3.3}) for i in range(5)]
    payload = [event("Arsenal", "Chelsea", KICKOFF, books)]

    [match] = normalize_match_stats(payload)

    assert [b["title"] for b in match.bookmakers] == ["Book 0", "Book 1", "Book 2"]
    assert match.bookmakers[0]["last_update"] == "2024-08-10T09:00:00Z"
    assert match.completed is False
    assert match.scores is None


def test_match_stats_require_list():
    with pytest.raises(MalformedPayload):
        normalize_match_stats({"message": "nope"})
