from src.payroll_system.payroll_system.employees.memory_repository import InMemoryEmployeeRepository
from src.payroll_system.payroll_system.employees.model import ContractEmployee, FullTimeEmployee, Intern, PartTimeEmployee


def _full_time(repo, name="Vikas"):
    return FullTimeEmployee(employee_id=repo.next_id(), name=name, email=f"{name.lower()}@example.com", monthly_salary=70000.0)


def test_ids_start_at_one_and_increase_per_repository():
    repo = InMemoryEmployeeRepository()
    other = InMemoryEmployeeRepository()

    assert [repo.next_id(), repo.next_id(), repo.next_id()] == [1, 2, 3]
    assert other.next_id() == 1


def test_ids_are_not_reused_after_remove(repo):
    first = _full_time(repo)
    repo.add(first)
    repo.remove(first.employee_id)

    assert repo.next_id() == 2


def test_remove_existing_reduces_count_and_find_returns_none(repo):
    e = _full_time(repo)
    repo.add(e)
    repo.add(_full_time(repo, "Raj"))

    assert repo.remove(e.employee_id) is True
    assert repo.count() == 1
    assert repo.find_by_id(e.employee_id) is None


def test_remove_missing_returns_false_and_keeps_count(repo):
    repo.add(_full_time(repo))

    assert repo.remove(99) is False
    assert repo.count() == 1


def test_add_does_not_detect_duplicates(repo):
    repo.add(_full_time(repo, "Same"))
    repo.add(_full_time(repo, "Same"))

    assert [e.employee_id for e in repo.search_by_name("same")] == [1, 2]


def test_search_is_case_insensitive_and_empty_matches_all(repo):
    repo.add(_full_time(repo, "Vikas"))
    repo.add(Intern(employee_id=repo.next_id(), name="Ria", email="ria@example.com", stipend=5000.0))

    assert [e.name for e in repo.search_by_name("RIA")] == ["Ria"]
    assert [e.name for e in repo.search_by_name("")] == ["Vikas", "Ria"]
    assert repo.search_by_name("zzz") == []


def test_list_all_keeps_insertion_order(repo):
    added = [
        _full_time(repo),
        PartTimeEmployee(employee_id=repo.next_id(), name="Manish", email="m@x", hours_worked=40, hourly_rate=100.0),
        ContractEmployee(employee_id=repo.next_id(), name="Raj", email="r@x", contract_amount=50000.0),
        Intern(employee_id=repo.next_id(), name="Ria", email="ria@x", stipend=5000.0),
    ]
    for e in added:
        repo.add(e)

    assert list(repo.list_all()) == added


def test_list_all_returns_a_copy(repo):
    repo.add(_full_time(repo))

    repo.list_all().clear()

    assert repo.count() == 1
