from sophon.telegram import formatter


def test_messages_are_tagged():
    message = formatter.radius(13000)

    assert message == "Sophon 8d9b13c5 TX: the universe has expanded to 13000 adjust accordingly #darkforest"


def test_planet_counts_lists_every_level():
    message = formatter.planet_counts([10, 9, 8, 7, 6, 5, 4, 3])

    assert "lvl0:10, lvl1:9, lvl2:8, lvl3:7, lvl4:6, lvl5:5, lvl6:4, lvl7:3" in message
    assert message.startswith("Sophon 02369284 TX: Universe planet totals")


def test_alert_kinds_have_distinct_tags():
    messages = [
        formatter.transfer_milestone(100000),
        formatter.congestion(12),
        formatter.achievement(2, "0xp", "0xq"),
        formatter.artifact("RARE", 3, "0xq", "0xp"),
        formatter.longest_transfer(900, "0xp"),
        formatter.value_moved(42, "0xp"),
        formatter.radius(1000),
        formatter.player_count(10),
        formatter.planet_counts([0] * 8),
    ]

    tags = {m.split(" ")[1] for m in messages}
    assert len(tags) == len(messages)
    assert all(m.endswith("#darkforest") for m in messages)
