from datetime import date

from trend_report.services.trends_service import TrendsService


def test_latest_trends_are_curated_and_dated_relative_to_today():
    trends = TrendsService().get_latest_trends(today=date(2024, 3, 15))

    assert len(trends) == 5
    assert trends[1].title == "Generative Design with AI"
    assert [t.date for t in trends] == [
        date(2024, 3, 13),
        date(2024, 3, 10),
        date(2024, 3, 8),
        date(2024, 3, 5),
        date(2024, 3, 3),
    ]
    assert all(t.summary and t.source_url.startswith("https://example.com/") for t in trends)


def test_latest_trends_get_fresh_ids():
    service = TrendsService()
    first = {t.id for t in service.get_latest_trends()}
    second = {t.id for t in service.get_latest_trends()}
    assert len(first) == 5
    assert first.isdisjoint(second)
