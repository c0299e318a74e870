import pytest

from gostudy.builder import HuaWeiBuilder, Manager, Phone, XiaomiBuilder


@pytest.mark.parametrize(
    ("builder", "expected"),
    [
        (HuaWeiBuilder(), Phone("HuaWeiPhone", "海思麒麟处理器", "莱卡摄像头", "OLED")),
        (XiaomiBuilder(), Phone("XiaomiPhone", "高通骁龙处理器", "索尼摄像头", "OLED")),
    ],
)
def test_manager_produces_phone(builder, expected):
    phone = Manager(builder=builder).produce()
    assert phone == expected


def test_produce_prints_assembly_message(capsys):
    Manager(HuaWeiBuilder()).produce()
    out = capsys.readouterr().out
    assert out == "华为生产线的工人组装了一台华为手机\n"


def test_each_produce_returns_new_phone():
    builder = XiaomiBuilder()
    first = builder.produce()
    second = builder.produce()
    assert first == second
    assert first is not second


def test_add_steps_fill_fields():
    phone = Phone("blank")
    builder = HuaWeiBuilder()
    builder.add_camera(phone)
    assert phone.camera == "莱卡摄像头"
    assert phone.processor == ""