"""A small hand-built world shared by the tests. Each call returns a fresh document."""


def msg(text):
    return {"Event": 0, "Arguments": [text]}


def add_item(item_id):
    return {"Event": 1, "Arguments": [item_id]}


def remove_item(item_id):
    return {"Event": 2, "Arguments": [item_id]}


def move_to(index):
    return {"Event": 3, "Arguments": [str(index)]}


def set_flag(name, value):
    return {"Event": 4, "Arguments": [name, value]}


def cellar_world():
    return {
        "Items": [
            {"Id": "lamp", "Name": "Brass Lamp", "Description": "A dented brass lamp."},
            {"Id": "key", "Name": "Iron Key", "Description": "A heavy iron key."},
            {"Id": "rope", "Name": "Rope", "Description": "A coil of rope."},
            {"Id": "oil", "Name": "Lamp Oil", "Description": "A flask of oil."},
        ],
        "Maps": [{
            "Name": "Old House",
            "Description": "A house.",
            "Introduction": "You wake up in the dark.",
            "Locations": [
                {
                    "Name": "Cellar",
                    "Description": "A damp cellar.",
                    "Items": ["lamp"],
                    "FocalPoints": [
                        {
                            "Name": "Trapdoor",
                            "Description": "A trapdoor in the ceiling.",
                            "Flags": [],
                            "Events": [
                                {"Event": 1, "Actions": [msg("It creaks.")]},
                                {"Event": 2, "Actions": [msg("You climb up."), move_to(1)]},
                            ],
                        },
                        {
                            "Name": "Crate",
                            "Description": "A nailed-down crate.",
                            "Flags": [],
                            "Events": [
                                {"Event": 2, "Actions": [msg("You rummage through the crate."), add_item("key")]},
                                {"Event": 3, "ItemId": "key", "Actions": [
                                    msg("The key turns; the crate's lid springs open."),
                                    set_flag("crate_open", "true"),
                                ]},
                            ],
                            "Aliases": [
                                {"Verb": "kick", "Actions": [msg("You kick the crate."), set_flag("kicked", "true")]},
                                {"Verb": "pry", "RequiredItems": ["rope"], "Actions": [msg("You pry it with the rope.")]},
                                {"Verb": "smash", "RequiredFlags": [{"Name": "kicked", "Flag": True}],
                                 "Actions": [msg("The crate splinters."), add_item("oil"), set_flag("smashed", "true")]},
                            ],
                        },
                        {
                            "Name": "Hidden Passage",
                            "Description": "A narrow passage behind the crate.",
                            "Flags": [{"Name": "crate_open", "Flag": True}],
                            "Events": [
                                {"Event": 2, "Actions": [msg("You squeeze through."), move_to(2)]},
                            ],
                        },
                        {
                            "Name": "Workbench",
                            "Description": "A sturdy workbench.",
                            "Flags": [],
                            "Events": [
                                {"Event": 4, "ItemId": "lamp", "Actions": [msg("You refill the lamp with oil."), remove_item("oil")]},
                            ],
                        },
                    ],
                },
                {
                    "Name": "Attic",
                    "Description": "A dusty attic.",
                    "Items": [],
                    "FocalPoints": [
                        {
                            "Name": "Ladder",
                            "Description": "A rickety ladder.",
                            "Flags": [],
                            "Events": [{"Event": 2, "Actions": [move_to(0)]}],
                        },
                        {
                            "Name": "Sleeping Cat",
                            "Description": "A cat, fast asleep.",
                            "Flags": [{"Name": "cat_awake", "Flag": False}],
                            "Events": [{"Event": 2, "Actions": [msg("The cat wakes up and bolts."), set_flag("cat_awake", "true")]}],
                        },
                    ],
                },
                {
                    "Name": "Tunnel",
                    "Description": "A cramped tunnel.",
                    "Items": [],
                    "FocalPoints": [],
                },
            ],
        }],
    }
