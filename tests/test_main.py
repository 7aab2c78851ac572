"""Tests for the command line interface."""
import logging

import httpx
import pytest
from doctoscrape import main as main_module
from doctoscrape.fetch.client import FetchClient
from doctoscrape.main import parse_args


def test_parse_args_defaults():
    args = parse_args(["75005"])

    assert args.postal_code == "75005"
    assert args.city == "paris"
    assert args.exclude == []
    assert args.pages == 1
    assert args.skip_malformed is False
    assert args.verbose is False


def test_parse_args_all_options():
    args = parse_args(["69003", "-c", "lyon", "-x", "69001", "--exclude", "69002", "-p", "3", "--skip-malformed", "-v"])

    assert args.postal_code == "69003"
    assert args.city == "lyon"
    assert args.exclude == ["69001", "69002"]
    assert args.pages == 3
    assert args.skip_malformed is True
    assert args.verbose is True


def test_parse_args_requires_postal_code():
    with pytest.raises(SystemExit) as exc_info:
        parse_args([])
    assert exc_info.value.code == 2


@pytest.mark.parametrize("pages", ["0", "-1", "two"])
def test_parse_args_rejects_bad_page_count(pages):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["75005", "--pages", pages])
    assert exc_info.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("doctoscrape ")


@pytest.fixture
def fake_site(monkeypatch):
    """Route main()'s client to an in-memory site and leave logging config alone."""
    routes = {}

    def handler(request):
        return routes.get(request.url.path, httpx.Response(404))

    monkeypatch.setattr(main_module, "setup_logging", lambda level=None: None)
    monkeypatch.setattr(main_module, "FetchClient", lambda: FetchClient(transport=httpx.MockTransport(handler)))
    return routes


def test_main_reports_slots(fake_site, caplog):
    fake_site["/vaccination-covid-19/75005-paris"] = httpx.Response(
        200, text='<div class="dl-search-result" id="search-result-10"></div>'
    )
    fake_site["/search_results/10.json"] = httpx.Response(200, json={
        "availabilities": [{"date": "2021-05-17", "slots": [
            {"agenda_id": 1, "start_date": "2021-05-17T09:06:00.000+02:00", "end_date": "2021-05-17T09:12:00.000+02:00"},
        ]}],
        "search_result": {
            "address": "19b Place du Panthéon",
            "city": "Paris",
            "name_with_title": "Centre COVID - Paris 5",
            "zipcode": "75005",
            "url": "/centre-de-sante/paris/centre-covid19-paris-5",
        },
    })
    caplog.set_level(logging.INFO)

    main_module.main(["75005"])

    assert "Centre COVID - Paris 5 at 19b Place du Panthéon, 75005 has slots!" in caplog.text


def test_main_exits_on_page_failure(fake_site, caplog):
    with pytest.raises(SystemExit) as exc_info:
        main_module.main(["75005"])

    assert exc_info.value.code == 1
    assert "Fatal error" in caplog.text
