import pytest

from keuzekompas.features.modules.importer import import_csv, parse_modules
from keuzekompas.features.modules.repository import build_filter
from keuzekompas.features.modules.schemas import ModuleQuery

pytestmark = pytest.mark.anyio("asyncio")

CSV = """\ufeffid,name,shortdescription,description,content,studycredit,location,contact_id,level,learningoutcomes
1,Data Science,Intro,,,15,Breda,3,NLQF5,
2,Advanced AI,Deep,Neural nets,,30,Tilburg,,NLQF6,Models

3,,Missing name,,,15,Breda,,NLQF5,
4,Broken credits,,,,zero,Breda,,NLQF5,
"""


def test_parse_modules_collects_valid_rows_and_errors():
    modules, errors = parse_modules(CSV)
    assert [m.id for m in modules] == [1, 2]
    assert modules[0].description is None
    assert modules[0].contact_id == 3
    assert len(errors) == 2
    assert "name" in errors[0][1]
    assert "studycredit" in errors[1][1]


async def test_import_csv_upserts(fake_db):
    report = await import_csv(CSV)
    assert (report.created, report.updated, len(report.errors)) == (2, 0, 2)

    again = await import_csv(CSV.replace("Advanced AI", "Applied AI"))
    assert (again.created, again.updated) == (0, 2)

    names = sorted(d["name"] for d in fake_db["modules"].docs)
    assert names == ["Applied AI", "Data Science"]
    assert all("created_at" in d for d in fake_db["modules"].docs)


def test_build_filter_combines_dimensions():
    assert build_filter(None) == {}
    clauses = build_filter(ModuleQuery(q=" a+b ", studycredit=[15], level=["NLQF5"]))
    assert clauses["studycredit"] == {"$in": [15]}
    assert clauses["level"] == {"$in": ["NLQF5"]}
    assert "location" not in clauses
    assert clauses["$or"][0] == {"name": {"$regex": r"a\+b", "$options": "i"}}
