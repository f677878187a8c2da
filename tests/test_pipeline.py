from datetime import datetime, timezone

import pytest
import yaml

from pubfeed.errors import RosterError
from pubfeed.models import Paper
from pubfeed.services.aggregator import PublicationAggregator
from pubfeed.services.pipeline import PublicationPipeline
from pubfeed.settings import Settings


class _StubSource:
    def __init__(self, results: dict[str, list[Paper]]) -> None:
        self._results = results
        self.queried: list[str] = []

    async def query_author(self, identifier: str, cutoff: str) -> list[Paper]:
        self.queried.append(identifier)
        return self._results.get(identifier, [])


async def _no_sleep(seconds: float) -> None:
    return None


def _settings(tmp_path) -> Settings:
    members = tmp_path / "members.yml"
    members.write_text(
        "- name: Alice\n  inspire: A\n- name: Nobody\n- name: Bob\n  inspire: B\n",
        encoding="utf-8",
    )
    return Settings(members_path=members, output_path=tmp_path / "out" / "publications.yml")


@pytest.mark.asyncio
async def test_pipeline_writes_filtered_sorted_publications(tmp_path) -> None:
    settings = _settings(tmp_path)
    source = _StubSource(
        {
            "A": [
                Paper(inspire_id="1", title="A Neural Network Study", date="2024-05-01"),
                Paper(inspire_id="3", title="Transformer jets", date=None),
            ],
            "B": [
                Paper(inspire_id="1", title="A Neural Network Study", date="2024-05-01"),
                Paper(inspire_id="2", title="Unrelated Topic", date="2024-06-01"),
                Paper(inspire_id="4", title="Dark matter", abstract="via deep learning", date="2024-07-01"),
            ],
        }
    )
    pipeline = PublicationPipeline(settings, PublicationAggregator(source, sleep=_no_sleep))

    summary = await pipeline.run(now=datetime(2024, 11, 15, tzinfo=timezone.utc))

    assert source.queried == ["A", "B"]
    assert summary.cutoff == "2024-05-15"
    assert summary.authors_queried == 2
    assert summary.unique_papers == 4
    assert summary.kept_papers == 3
    written = yaml.safe_load(settings.output_path.read_text(encoding="utf-8"))
    assert [item["title"] for item in written] == [
        "Dark matter",
        "A Neural Network Study",
        "Transformer jets",
    ]
    assert written[1]["eucaif_authors"] == ["A", "B"]


@pytest.mark.asyncio
async def test_pipeline_fails_on_missing_roster(tmp_path) -> None:
    settings = Settings(members_path=tmp_path / "absent.yml", output_path=tmp_path / "out.yml")
    source = _StubSource({})
    pipeline = PublicationPipeline(settings, PublicationAggregator(source, sleep=_no_sleep))

    with pytest.raises(RosterError):
        await pipeline.run()

    assert source.queried == []
    assert not settings.output_path.exists()
