import unittest
from types import SimpleNamespace

from column_registry import Alignment, ColumnDef, WidthPolicy
from sort_engine import Ordering
from spreadsheet_view import SpreadsheetView


def _people_view():
    view = SpreadsheetView()
    view.add_column("name")
    view.add_column("dept")
    view.push_record({"name": "Bob", "dept": "B"})
    view.push_record({"name": "Amy", "dept": "A"})
    view.push_record({"name": "Cid", "dept": "A"})
    return view


def _rows(view):
    return [f"{r['name']}/{r['dept']}" for r in view.records()]


class SortScenarioTests(unittest.TestCase):
    def test_incremental_sort_groups_by_dept_then_name(self):
        view = _people_view()
        view.sort_by_column("dept", True)
        view.sort_by_column("name", True)
        self.assertEqual(_rows(view), ["Amy/A", "Cid/A", "Bob/B"])
        self.assertEqual(view.sort_keys, [("dept", True), ("name", True)])
        self.assertEqual(view.sort_order, ("dept", True))

    def test_name_then_dept_orders_by_name_first(self):
        view = _people_view()
        view.sort_by_column("name", True)
        view.sort_by_column("dept", True)
        self.assertEqual(_rows(view), ["Amy/A", "Bob/B", "Cid/A"])

    def test_resorting_existing_key_restarts_chain_from_it(self):
        view = _people_view()
        view.sort_by_column("dept", True)
        view.sort_by_column("name", True)
        view.sort_by_column("dept", False)
        self.assertEqual(_rows(view), ["Bob/B", "Amy/A", "Cid/A"])
        self.assertEqual(view.sort_keys, [("dept", False)])

    def test_rows_pushed_after_a_sort_keep_order_on_ties(self):
        view = SpreadsheetView()
        view.add_column("name")
        view.add_column("dept")
        view.push_record({"name": "X", "dept": "A"})
        view.push_record({"name": "Y", "dept": "B"})
        view.sort_by_column("dept")
        view.push_record({"name": "Y", "dept": "A"})
        view.sort_by_column("name")
        self.assertEqual(_rows(view), ["X/A", "Y/B", "Y/A"])

    def test_rows_edited_after_a_sort_keep_order_on_ties(self):
        view = SpreadsheetView()
        view.add_column("k")
        view.add_column("v")
        view.extend_records([{"id": "a", "k": 1, "v": 1}, {"id": "b", "k": 2, "v": 1}])
        view.sort_by_column("k")
        view.set_read_only(False)
        self.assertTrue(view.set_cell(0, "k", 3))
        view.sort_by_column("v")
        self.assertEqual([r["id"] for r in view.records()], ["a", "b"])

    def test_clear_sort_starts_a_new_chain(self):
        view = _people_view()
        view.sort_by_column("dept", True)
        view.clear_sort()
        view.sort_by_column("name", False)
        self.assertEqual(_rows(view), ["Cid/A", "Bob/B", "Amy/A"])
        self.assertEqual(view.sort_keys, [("name", False)])

    def test_equal_rows_keep_relative_order(self):
        view = SpreadsheetView()
        view.add_column("k")
        view.extend_records([{"k": 1, "id": "a"}, {"k": 0}, {"k": 1, "id": "b"}])
        view.sort_by_column("k", False)
        self.assertEqual([r.get("id") for r in view.records()], ["a", "b", None])

    def test_sort_by_columns(self):
        view = _people_view()
        self.assertTrue(view.sort_by_columns([("dept", True), ("name", True)]))
        self.assertEqual(_rows(view), ["Amy/A", "Cid/A", "Bob/B"])
        self.assertEqual(view.sort_order, ("dept", True))

    def test_sort_unknown_column_is_noop(self):
        view = _people_view()
        before = _rows(view)
        self.assertFalse(view.sort_by_column("nonexistent", True))
        self.assertFalse(view.sort_by_columns([("nope", False)]))
        self.assertEqual(_rows(view), before)
        self.assertIsNone(view.sort_order)

    def test_toggle_sort_flips_direction(self):
        view = _people_view()
        view.toggle_sort("name")
        self.assertEqual(view.sort_order, ("name", True))
        self.assertEqual(_rows(view)[0], "Amy/A")
        view.toggle_sort("name")
        self.assertEqual(view.sort_order, ("name", False))
        self.assertEqual(_rows(view)[0], "Cid/A")
        view.toggle_sort("dept")
        self.assertEqual(view.sort_order, ("dept", True))

    def test_removing_sorted_column_forgets_sort(self):
        view = _people_view()
        view.sort_by_column("dept")
        view.remove_column("dept")
        self.assertIsNone(view.sort_order)

    def test_sort_keeps_cursor_position_not_record(self):
        view = _people_view()
        view.set_cursor(0, 0)
        self.assertEqual(view.focused_record()["name"], "Bob")
        view.sort_by_column("name")
        self.assertEqual(view.cursor, (0, 0))
        self.assertEqual(view.focused_record()["name"], "Amy")


class CursorScenarioTests(unittest.TestCase):
    def test_records_without_columns(self):
        view = SpreadsheetView()
        view.push_record({"name": "Bob"})
        self.assertEqual(view.record_count, 1)
        self.assertIsNone(view.set_cursor(0, 0))
        self.assertIsNone(view.cursor)
        view.add_column("name")
        self.assertEqual(view.set_cursor(0, 0), (0, 0))
        self.assertEqual(view.focused_key(), "name")

    def test_cursor_clamped_to_last_index(self):
        view = _people_view()
        self.assertEqual(view.set_cursor(9, 9), (1, 2))

    def test_cursor_absent_after_clearing(self):
        view = _people_view()
        view.set_cursor(1, 1)
        view.clear_records()
        self.assertIsNone(view.cursor)
        self.assertIsNone(view.focused_record())
        view.push_record({"name": "Dee"})
        self.assertEqual(view.cursor, (1, 0))

    def test_removing_columns_clamps_cursor(self):
        view = _people_view()
        view.set_cursor(1, 2)
        view.remove_last_column()
        self.assertEqual(view.cursor, (0, 2))
        view.remove_column("name")
        self.assertIsNone(view.cursor)
        self.assertIsNone(view.remove_last_column())

    def test_set_cursor_ignored_while_disabled(self):
        view = _people_view()
        view.set_cursor(1, 1)
        view.disable()
        self.assertFalse(view.is_enabled())
        self.assertEqual(view.set_cursor(0, 0), (1, 1))
        view.enable()
        self.assertEqual(view.set_cursor(0, 0), (0, 0))


class RecordScenarioTests(unittest.TestCase):
    def test_remove_record_bounds(self):
        view = _people_view()
        self.assertIsNone(view.remove_record(3))
        self.assertEqual(view.record_count, 3)
        removed = view.remove_record(0)
        self.assertEqual(removed["name"], "Bob")
        self.assertEqual(view.record(0)["name"], "Amy")

    def test_removing_rows_prunes_selection(self):
        view = _people_view()
        view.add_selection(0, 2)
        view.add_selection(0, 0)
        view.pop_record()
        self.assertEqual(view.selected_cells(), [(0, 0)])

    def test_insert_record(self):
        view = _people_view()
        self.assertEqual(view.insert_record(1, {"name": "Zed"}), 1)
        self.assertEqual(view.record(1)["name"], "Zed")

    def test_edits_gated_by_read_only(self):
        view = _people_view()
        self.assertTrue(view.is_read_only())
        self.assertFalse(view.set_cell(0, "dept", "C"))
        view.set_read_only(False)
        self.assertTrue(view.set_cell(0, "dept", "C"))
        self.assertEqual(view.cell_text(0, "dept"), "C")
        self.assertTrue(view.clear_cell(0, "dept"))
        self.assertEqual(view.cell_text(0, "dept"), "")
        self.assertFalse(view.set_cell(10, "dept", "C"))

    def test_unhashable_keys_are_ignored(self):
        view = _people_view()
        view.set_read_only(False)
        self.assertIsNone(view.remove_column(["name"]))
        self.assertFalse(view.sort_by_column(["name"]))
        self.assertFalse(view.toggle_sort(["name"]))
        self.assertFalse(view.sort_by_columns([(["name"], True)]))
        self.assertFalse(view.set_cell(0, ["name"], "x"))
        self.assertFalse(view.clear_cell(0, ["name"]))
        self.assertEqual(view.cell_text(0, ["name"]), "")
        self.assertIsNone(view.column(["name"]))
        self.assertIsNone(view.content_width(["name"]))
        self.assertEqual(view.column_count, 2)
        self.assertEqual(_rows(view), ["Bob/B", "Amy/A", "Cid/A"])

    def test_content_width_applies_policy(self):
        view = SpreadsheetView()
        view.add_column("name", title="Name")
        view.insert_column(
            ColumnDef(key="dept", title="D", width_policy=WidthPolicy.fixed(3))
        )
        view.push_record({"name": "Bartholomew", "dept": "Engineering"})
        self.assertEqual(view.content_width("name"), 11)
        self.assertEqual(view.content_width("dept"), 3)
        self.assertIsNone(view.content_width("missing"))

    def test_add_column_defaults(self):
        view = SpreadsheetView(config={"DEFAULT_ALIGNMENT": "end"})
        column = view.add_column("amount")
        self.assertEqual(column.title, "amount")
        self.assertIs(column.alignment, Alignment.END)
        self.assertEqual(column.width_policy.resolve(), (0, None))
        column = view.add_column("note", align="center")
        self.assertIs(column.alignment, Alignment.CENTER)


class CallbackTests(unittest.TestCase):
    def test_on_sort_receives_context_key_and_ordering(self):
        view = _people_view()
        calls = []
        view.set_on_sort(lambda ctx, key, ordering: calls.append((ctx, key, ordering)))
        host = SimpleNamespace(redraws=0)
        view.sort_by_column("name", False, context=host)
        view.sort_by_column("nonexistent", True, context=host)
        self.assertEqual(calls, [(host, "name", Ordering.GREATER)])

    def test_on_submit_fires_with_row_then_column(self):
        view = _people_view()
        host = SimpleNamespace(submitted=[])
        view.set_on_submit(lambda ctx, row, col: ctx.submitted.append((row, col)))
        view.set_cursor(1, 2)
        self.assertTrue(view.submit(host))
        self.assertEqual(host.submitted, [(2, 1)])

    def test_submit_without_handler_or_cursor(self):
        view = SpreadsheetView()
        self.assertFalse(view.submit())
        view = _people_view()
        self.assertTrue(view.submit())

    def test_select_materializes_and_notifies(self):
        view = _people_view()
        seen = []
        view.set_on_select(lambda ctx, row, col: seen.append((ctx, row, col)))
        view.set_cursor(1, 0)
        view.toggle_column_select()
        self.assertTrue(view.select("ctx"))
        self.assertEqual(view.selected_cells(), [(1, 0), (1, 1), (1, 2)])
        self.assertEqual(seen, [("ctx", 0, 1)])

    def test_select_and_submit_ignored_while_disabled(self):
        view = _people_view()
        seen = []
        view.set_on_select(lambda *args: seen.append(args))
        view.set_on_submit(lambda *args: seen.append(args))
        view.set_enabled(False)
        self.assertFalse(view.select())
        self.assertFalse(view.submit())
        self.assertEqual(seen, [])
        self.assertEqual(view.selected_cells(), [])

    def test_handler_errors_propagate(self):
        view = _people_view()

        def boom(ctx, row, col):
            raise RuntimeError("host failure")

        view.set_on_submit(boom)
        with self.assertRaises(RuntimeError):
            view.submit()


if __name__ == "__main__":
    unittest.main()
