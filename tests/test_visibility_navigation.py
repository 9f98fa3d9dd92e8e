import unittest

from fiction_engine.navigation import Destination, available_locations
from fiction_engine.session import Session
from fiction_engine.visibility import flags_match, visible_focal_points, visible_items
from fiction_engine.world import Flag, World

from tests.fixtures import cellar_world, move_to


class TestVisibility(unittest.TestCase):
    def setUp(self):
        self.world = World(cellar_world())
        self.session = Session.new(self.world)

    def names(self):
        return [p.name for p in visible_focal_points(self.world, self.session)]

    def test_absent_flag_reads_false(self):
        self.assertFalse(self.session.flag("never_set"))
        self.assertTrue(flags_match([Flag("never_set", False)], self.session))
        self.assertFalse(flags_match([Flag("never_set", True)], self.session))

    def test_ungated_points_always_visible(self):
        self.assertEqual(self.names(), ["Trapdoor", "Crate", "Workbench"])
        self.session.flags = {"anything": True, "crate_open": False}
        self.assertIn("Trapdoor", self.names())
        self.assertIn("Workbench", self.names())

    def test_gated_point_appears_in_authoring_order(self):
        self.session.set_flag("crate_open", True)
        self.assertEqual(self.names(), ["Trapdoor", "Crate", "Hidden Passage", "Workbench"])

    def test_false_requirement(self):
        self.session.current_location = 1
        self.assertEqual(self.names(), ["Ladder", "Sleeping Cat"])
        self.session.set_flag("cat_awake", True)
        self.assertEqual(self.names(), ["Ladder"])

    def test_every_flag_must_match(self):
        flags = [Flag("a", True), Flag("b", False)]
        self.session.flags = {"a": True}
        self.assertTrue(flags_match(flags, self.session))
        self.session.flags = {"a": True, "b": True}
        self.assertFalse(flags_match(flags, self.session))

    def test_visible_items_follow_spawned_state(self):
        self.assertEqual([i.name for i in visible_items(self.world, self.session)], ["Brass Lamp"])
        self.session.spawned_items["lamp"] = False
        self.assertEqual(visible_items(self.world, self.session), [])

    def test_visible_items_include_scene_overlay(self):
        self.session.add_scene_item("key")
        self.session.add_scene_item("ghost_item")
        self.session.spawned_items["key"] = True
        self.session.spawned_items["ghost_item"] = True
        # unresolved ids are dropped
        self.assertEqual([i.id for i in visible_items(self.world, self.session)], ["lamp", "key"])


class TestNavigation(unittest.TestCase):
    def setUp(self):
        self.world = World(cellar_world())
        self.session = Session.new(self.world)

    def test_exits_come_from_visible_move_actions(self):
        self.assertEqual(available_locations(self.world, self.session), [Destination(1, "Attic", "Trapdoor")])

    def test_flag_gated_exit(self):
        self.session.set_flag("crate_open", True)
        self.assertEqual(available_locations(self.world, self.session), [
            Destination(1, "Attic", "Trapdoor"),
            Destination(2, "Tunnel", "Hidden Passage"),
        ])

    def test_no_exits(self):
        self.session.current_location = 2
        self.assertEqual(available_locations(self.world, self.session), [])

    def test_duplicates_are_kept_in_scan_order(self):
        data = cellar_world()
        workbench = data["Maps"][0]["Locations"][0]["FocalPoints"][3]
        workbench["Events"].append({"Event": 1, "Actions": [move_to(1)]})
        world = World(data)
        self.assertEqual(available_locations(world, Session.new(world)), [
            Destination(1, "Attic", "Trapdoor"),
            Destination(1, "Attic", "Workbench"),
        ])

    def test_dangling_target_is_skipped(self):
        data = cellar_world()
        data["Maps"][0]["Locations"][0]["FocalPoints"][0]["Events"][1]["Actions"].append(move_to(9))
        world = World(data)
        with self.assertLogs('fiction_engine.navigation', level='WARNING'):
            destinations = available_locations(world, Session.new(world))
        self.assertEqual(destinations, [Destination(1, "Attic", "Trapdoor")])

    def test_does_not_mutate_session(self):
        before = self.session.to_state()
        available_locations(self.world, self.session)
        self.assertEqual(self.session.to_state(), before)


if __name__ == '__main__':
    unittest.main()
