import pytest

from gostudy.abstract_factory import (
    HuaWeiCharger,
    HuaWeiPhone,
    JsonConfigParserFactory,
    JsonRuleConfigParser,
    JsonSystemConfigParser,
    XiaomiCharger,
    XiaomiPhone,
    XmlConfigParserFactory,
    XmlRuleConfigParser,
    XmlSystemConfigParser,
    new_phone_and_charger_factory,
)

NUMBER = "12345"


@pytest.mark.parametrize(
    ("kind", "phone", "charger", "call_line", "charge_line"),
    [
        ("HuaWei", HuaWeiPhone(), HuaWeiCharger(), "华为手机拨打电话： 12345", "华为充电器给 华为手机 充电"),
        ("Xiaomi", XiaomiPhone(), XiaomiCharger(), "小米手机拨打电话： 12345", "小米充电器给 小米手机 充电"),
    ],
)
def test_phone_and_charger_factory(kind, phone, charger, call_line, charge_line, capsys):
    factory = new_phone_and_charger_factory(kind)
    got_phone = factory.produce_phone()
    got_charger = factory.produce_charger()
    assert got_phone == phone
    assert got_charger == charger
    assert got_phone.call(NUMBER) == call_line
    assert got_charger.charge(got_phone) == charge_line
    assert capsys.readouterr().out == f"{call_line}\n{charge_line}\n"


def test_charger_uses_phone_name():
    assert XiaomiCharger().charge(HuaWeiPhone()) == "小米充电器给 华为手机 充电"


def test_unknown_device_factory_raises():
    with pytest.raises(ValueError):
        new_phone_and_charger_factory("Iphone")


@pytest.mark.parametrize(
    ("factory", "rule", "system"),
    [
        (JsonConfigParserFactory(), JsonRuleConfigParser(), JsonSystemConfigParser()),
        (XmlConfigParserFactory(), XmlRuleConfigParser(), XmlSystemConfigParser()),
    ],
)
def test_config_parser_families(factory, rule, system):
    got_rule = factory.create_rule_config_parser()
    got_system = factory.create_system_config_parser()
    assert got_rule == rule
    assert got_system == system
    assert got_rule.format == got_system.format