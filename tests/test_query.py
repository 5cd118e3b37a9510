import pytest

from quickbooks_api_client import MAX_QUERY_LENGTH, QueryConfig, build_query_string
from quickbooks_api_client.exceptions import PreconditionError


def test_default_config_selects_first_full_page():
    assert build_query_string("Item") == "SELECT * FROM Item MAXRESULTS 1000 STARTPOSITION 1"


def test_clauses_follow_page_window_in_fixed_order():
    query = build_query_string(
        "Item",
        QueryConfig(where="Active = true", order_by="Name DESC", start_position=3, max_results=50),
    )
    assert query == (
        "SELECT * FROM Item MAXRESULTS 50 STARTPOSITION 3 "
        "WHERE Active = true ORDERBY Name DESC"
    )


@pytest.mark.parametrize(
    "where,order_by,suffix",
    [
        ("Id = '1'", None, " WHERE Id = '1'"),
        (None, "Name", " ORDERBY Name"),
        ("", "", ""),
    ],
)
def test_optional_clauses(where, order_by, suffix):
    query = build_query_string("Customer", QueryConfig(where=where, order_by=order_by))
    assert query == "SELECT * FROM Customer MAXRESULTS 1000 STARTPOSITION 1" + suffix


def test_where_and_order_by_are_passed_through_verbatim():
    query = build_query_string("Customer", QueryConfig(where="DisplayName LIKE '%O''Brien%'"))
    assert query.endswith(" WHERE DisplayName LIKE '%O''Brien%'")


def test_max_results_above_cap_is_clamped():
    query = build_query_string("Item", QueryConfig(max_results=5000))
    assert f"MAXRESULTS {MAX_QUERY_LENGTH} " in query


@pytest.mark.parametrize("start_position", [0, -1])
def test_start_position_below_one_is_rejected(start_position):
    with pytest.raises(PreconditionError):
        build_query_string("Item", QueryConfig(start_position=start_position))


@pytest.mark.parametrize("max_results", [0, -10])
def test_max_results_below_one_is_rejected(max_results):
    with pytest.raises(PreconditionError):
        build_query_string("Item", QueryConfig(max_results=max_results))


@pytest.mark.parametrize("field", ["start_position", "max_results"])
@pytest.mark.parametrize("value", [True, 1.5, "1"])
def test_non_integer_bounds_are_rejected(field, value):
    with pytest.raises(PreconditionError):
        build_query_string("Item", QueryConfig(**{field: value}))


def test_precondition_error_is_a_value_error():
    with pytest.raises(ValueError):
        build_query_string("Item", QueryConfig(start_position=0))
