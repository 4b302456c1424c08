import pytest

from drillbook.reserve.manager import (
    Account,
    AccountKind,
    Manager,
    format_account,
    format_room,
    load_accounts,
)
from drillbook.reserve.orders import ComputerRoom, Order, OrderBook


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "student.txt").write_text(
        "1 alice password\n2 bob password\n", encoding="utf-8"
    )
    (tmp_path / "teacher.txt").write_text("10 carol password\n", encoding="utf-8")
    (tmp_path / "computerRoom.txt").write_text("1 20\n2 50\n3 100\n", encoding="utf-8")
    return tmp_path


def make_manager(data_dir):
    password = "password"
    return Manager("admin", password, data_dir)


def test_load_accounts_reads_triples(data_dir):
    accounts = load_accounts(data_dir / "student.txt")
    assert [a.account_id for a in accounts] == [1, 2]
    assert accounts[0] == Account(1, "alice", "password")


def test_load_accounts_stops_at_malformed(tmp_path):
    path = tmp_path / "student.txt"
    path.write_text("1 alice password\nxx bob password\n3 eve password\n", encoding="utf-8")
    assert [a.name for a in load_accounts(path)] == ["alice"]


def test_load_accounts_missing_file(tmp_path):
    assert load_accounts(tmp_path / "none.txt") == []


def test_menu_reports_counts(data_dir):
    menu = make_manager(data_dir).menu_text()
    assert "当前学生数量:2" in menu
    assert "当前老师数量:1" in menu
    assert "机房数量为:3" in menu
    assert menu.startswith("欢迎管理员:admin登录!")


def test_check_repeat(data_dir):
    manager = make_manager(data_dir)
    assert manager.check_repeat(1, AccountKind.STUDENT)
    assert not manager.check_repeat(10, AccountKind.STUDENT)
    assert manager.check_repeat(10, AccountKind.TEACHER)


def test_add_account_round_trip(data_dir):
    manager = make_manager(data_dir)
    password = "password"
    added = manager.add_account(AccountKind.STUDENT, 3, "dave", password)
    assert manager.accounts(AccountKind.STUDENT)[-1] == added
    reloaded = make_manager(data_dir)
    assert reloaded.accounts(AccountKind.STUDENT) == manager.accounts(AccountKind.STUDENT)
    assert len(reloaded.accounts(AccountKind.STUDENT)) == 3


def test_add_teacher_goes_to_teacher_file(data_dir):
    manager = make_manager(data_dir)
    password = "password"
    manager.add_account(AccountKind.TEACHER, 11, "erin", password)
    names = [a.name for a in load_accounts(data_dir / "teacher.txt")]
    assert names == ["carol", "erin"]
    assert manager.accounts(AccountKind.STUDENT) == load_accounts(data_dir / "student.txt")


def test_add_duplicate_raises(data_dir):
    manager = make_manager(data_dir)
    password = "password"
    with pytest.raises(ValueError, match="学号重复"):
        manager.add_account(AccountKind.STUDENT, 1, "dup", password)
    with pytest.raises(ValueError, match="职工号重复"):
        manager.add_account(AccountKind.TEACHER, 10, "dup", password)
    assert len(load_accounts(data_dir / "student.txt")) == 2


def test_missing_student_file_leaves_both_empty(tmp_path):
    (tmp_path / "teacher.txt").write_text("10 carol password\n", encoding="utf-8")
    manager = make_manager(tmp_path)
    assert manager.accounts(AccountKind.STUDENT) == []
    assert manager.accounts(AccountKind.TEACHER) == []


def test_rooms_loaded(data_dir):
    manager = make_manager(data_dir)
    assert manager.rooms[0] == ComputerRoom(1, 20)
    assert format_room(manager.rooms[0]) == "机房编号:1 机房最大容量:20"


def test_clear_orders(data_dir):
    book = OrderBook.load(data_dir / "order.txt")
    book.append(Order("1", "1", "1", "alice", "1"))
    make_manager(data_dir).clear_orders()
    assert len(OrderBook.load(data_dir / "order.txt")) == 0
    assert (data_dir / "order.txt").read_text(encoding="utf-8") == ""


def test_format_account():
    account = Account(1, "alice", "password")
    assert format_account(AccountKind.STUDENT, account) == "学号:1 姓名:alice 密码:password"
    assert format_account(AccountKind.TEACHER, account).startswith("职工号:1")