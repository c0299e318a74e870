import json

import pytest

from gostudy.employee_json import BasicInfo, Employee, JobInfo

JSON_STR = """{
	"basic_info":{
		"name":"Mike",
		"age":30
	},
	"job_info":{
		"skills": ["java", "Go", "C"]
	}
}"""


def test_embedded_json_unmarshal():
    employee = Employee.from_json(JSON_STR)
    assert employee.basic_info.name == "Mike"
    assert employee.basic_info.age == 30
    assert employee.job_info.skills == ["java", "Go", "C"]


def test_embedded_json_marshal():
    employee = Employee.from_json(JSON_STR)
    assert employee.to_json() == (
        '{"basic_info":{"name":"Mike","age":30},'
        '"job_info":{"skills":["java","Go","C"]}}'
    )


def test_round_trip():
    employee = Employee(BasicInfo("Rose", 25), JobInfo(["Python"]))
    assert Employee.from_json(employee.to_json()) == employee


def test_empty_employee_marshals_zero_values():
    assert Employee().to_json() == (
        '{"basic_info":{"name":"","age":0},"job_info":{"skills":null}}'
    )


def test_keys_match_case_insensitively():
    employee = Employee.from_json('{"BASIC_INFO": {"Name": "Ann"}}')
    assert employee.basic_info.name == "Ann"


def test_null_and_missing_fields_keep_defaults():
    employee = Employee.from_json('{"basic_info": null, "extra": 1}')
    assert employee == Employee()


def test_html_characters_are_escaped():
    text = Employee(BasicInfo("<a&b>", 1)).to_json()
    assert "<" not in text and "&" not in text
    assert json.loads(text)["basic_info"]["name"] == "<a&b>"


@pytest.mark.parametrize(
    "text",
    [
        '{"basic_info": {"age": "30"}}',
        '{"basic_info": {"age": 30.5}}',
        '{"basic_info": {"name": 3}}',
        '{"job_info": {"skills": "Go"}}',
        "[1, 2]",
        "{not json",
    ],
)
def test_invalid_input_raises(text):
    with pytest.raises(ValueError):
        Employee.from_json(text)