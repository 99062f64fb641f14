"""Checkbox, switch, progress and separator components."""