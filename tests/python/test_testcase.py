from test_parser import NUNIT2, NUNIT3, case_xml, fixture_xml, parse, run_xml
import pytest

from nunit_report import parse_file
from nunit_report.errors import MalformedDurationError, MissingFieldError, UnknownStatusError
from nunit_report.models import Status
from nunit_report.testcase import DELIMITER


def single_test(case, suite_extra=""):
    report = parse(run_xml(fixture_xml("Fx", case, extra=suite_extra)))
    (suite,) = report.suites
    (test,) = suite.tests
    return test


def test_nunit3_passing_case():
    checkout = parse_file(NUNIT3).suites[1]
    test = checkout.tests[0]
    assert test.method_name == "PaysWithCard"
    assert test.status is Status.PASSED
    assert test.start_time == "2024-03-05 10:15:01Z"
    assert test.end_time == "2024-03-05 10:15:02Z"
    assert test.duration == "00:00:01:234"
    assert test.description == "Card payment succeeds"
    assert test.categories == ["Checkout", "Smoke"]
    assert test.screenshot_links == ['<a href="shots/cart.png">cart</a>']
    assert test.status_message == (
        DELIMITER
        + "EXECUTE STEPS:\n"
        + 'Step 1: open cart\nGenerated Screenshot: <a href="shots/cart.png">cart</a>'
        + DELIMITER
    )


def test_nunit3_failing_case():
    test = parse_file(NUNIT3).suites[1].tests[1]
    assert test.status is Status.FAILED
    assert test.screenshot_links == []
    assert test.status_message == (
        DELIMITER
        + "EXCEPTION MESSAGE: \nExpected: True\n  But was:  False"
        + DELIMITER
        + "EXCEPTION STACKTRACE:\nat Shop.CheckoutTests.RejectsExpiredCard() in C:\\build\\CheckoutTests.cs:line 42"
    )


def test_nunit3_skipped_cases():
    account = parse_file(NUNIT3).suites[0]
    deleted, locked = account.tests
    assert deleted.status_message == "Not ready"
    assert deleted.duration is None
    assert locked.duration == "00:00:00:000"
    assert locked.status_message == ""


def test_nunit2_error_with_blank_stack_trace():
    order = parse_file(NUNIT2).suites[1]
    cancelled = order.tests[1]
    assert cancelled.status is Status.ERROR
    assert cancelled.status_message == (
        DELIMITER
        + "EXCEPTION MESSAGE: \n"
        + "System.NullReferenceException : Object reference not set to an instance of an object."
    )
    assert cancelled.end_time == ""


def test_parameterized_wrapper_categories_are_inherited():
    checkout = parse_file(NUNIT3).suites[1]
    for test in checkout.tests[2:]:
        assert test.method_name == "AppliesDiscount"
        assert test.categories == ["Checkout", "Pricing"]


def test_only_nearest_parameterized_ancestor_counts():
    props = '<properties><property name="Category" value="{}" /></properties>'
    case = (
        '<test-suite type="ParameterizedTest" name="outer">'
        + props.format("Outer")
        + '<test-suite type="parameterizedtest" name="inner">'
        + props.format("Inner")
        + case_xml("t", body=props.format("Own"))
        + "</test-suite></test-suite>"
    )
    test = single_test(case, suite_extra=props.format("Suite"))
    assert test.categories == ["Inner", "Own", "Suite"]


def test_duplicate_categories_collapse():
    props = (
        "<properties>"
        '<property name="category" value="Fast" />'
        '<property name="CATEGORY" value="Fast" />'
        '<property name="Category" value="fast" />'
        '<property name="Category" />'
        "</properties>"
    )
    test = single_test(case_xml("t", body=props), suite_extra=props)
    assert test.categories == ["Fast", "fast"]


def test_description_from_nested_property():
    body = '<properties><property name="description" value="Checks totals" /></properties>'
    assert single_test(case_xml("t", body=body)).description == "Checks totals"
    assert single_test(case_xml("t")).description == ""


def test_start_time_fallbacks():
    assert single_test(case_xml("t", start_time="s", time="0.1")).start_time == "s"
    assert single_test(case_xml("t", time="0.1")).start_time == "0.1"
    assert single_test(case_xml("t")).start_time == ""


def test_status_message_sections_in_order():
    body = (
        "<failure><message>boom</message><stack-trace>at X()</stack-trace></failure>"
        "<reason><message> because </message></reason>"
        "<output>step one</output>"
    )
    test = single_test(case_xml("t", result="Failed", body=body))
    assert test.status_message == (
        DELIMITER + "EXCEPTION MESSAGE: \nboom"
        + DELIMITER + "EXCEPTION STACKTRACE:\nat X()"
        + "because"
        + DELIMITER + "EXECUTE STEPS:\nstep one" + DELIMITER
    )


def test_failure_without_message():
    body = "<failure><stack-trace>at X()</stack-trace></failure>"
    test = single_test(case_xml("t", result="Failed", body=body))
    assert test.status_message == DELIMITER + "EXCEPTION STACKTRACE:\nat X()"


def test_multiple_screenshots():
    output = (
        "<output><![CDATA["
        'Generated Screenshot: <a href="1.png">one</a>\n'
        "no marker here\n"
        'Generated Screenshot: <a href="2.png">two</a> then '
        'Generated Screenshot: <a href="3.png">three</a>'
        "]]></output>"
    )
    test = single_test(case_xml("t", body=output))
    assert test.screenshot_links == [
        '<a href="1.png">one</a>',
        '<a href="2.png">two</a>',
        '<a href="3.png">three</a>',
    ]


def test_output_without_marker_has_no_links():
    test = single_test(case_xml("t", body="<output>nothing</output>"))
    assert test.screenshot_links == []


def test_malformed_duration():
    with pytest.raises(MalformedDurationError):
        single_test(case_xml("t", duration="fast"))


def test_unknown_result_token():
    with pytest.raises(UnknownStatusError) as exc:
        single_test(case_xml("t", result="Exploded"))
    assert exc.value.token == "Exploded"


@pytest.mark.parametrize("missing", ["name", "methodname", "result"])
def test_required_test_case_attributes(missing):
    attrs = {"name": "t", "methodname": "t", "result": "Passed"}
    del attrs[missing]
    case = "<test-case " + " ".join(f'{k}="{v}"' for k, v in attrs.items()) + " />"
    with pytest.raises(MissingFieldError) as exc:
        single_test(case)
    assert exc.value.field == missing


def test_negative_duration_does_not_abort_report():
    test = single_test(case_xml("t", duration="-0.001"))
    assert test.duration == "00:00:00:001"
