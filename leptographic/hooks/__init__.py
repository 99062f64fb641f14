"""State hooks: controllable, checkbox and switch state, ids, previous values, key events."""