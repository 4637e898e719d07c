"""miniconf demo: declare options, parse argv, export and reload settings.

Try:

    python examples/demo.py -s hello --part1.value2 nested -n -2.5
    python examples/demo.py --config demo_settings.json
    python examples/demo.py --help
"""

import sys

from miniconf import Config, LogLevel

# ── Declare options ─────────────────────────────────────────────────

conf = Config("A simple example for miniconf")

conf.option("numOpt").shortflag("n").default_value(3.14).required(False).description("A number value")
conf.option("intOpt").shortflag("d").default_value(122).required(False).description("A integer value")
conf.option("boolOpt").shortflag("b").default_value(False).required(True).description("A boolean value")
conf.option("strOpt").shortflag("s").default_value("string").required(True).description("A string value")

# Dotted flags nest in exported JSON.
conf.option("part1.value1").shortflag("p1v1").default_value("p1v1").description("Nested value example")
conf.option("part1.value2").shortflag("p1v2").default_value("p1v2").description("Nested value example")
conf.option("part1.value3").shortflag("p1v3").default_value(1.3).description("Nested value example")
conf.option("part2.value1").shortflag("p2v1").default_value(2.1).description("Nested value example")
conf.option("part2.subpart1.value1").shortflag("p2-1v1").default_value("p2-1v1").description("Nested value example")
conf.option("part2.subpart1.value2").shortflag("p2-1v2").default_value("p2-1v2").description("Nested value example")
conf.option("part2.subpart2.value1").shortflag("p2-2v1").default_value("p2-2v1").description("Nested value example")

# Existing options can be adjusted, as long as the kind stays the same.
conf.option("strOpt").default_value("another string")

conf.log_level = LogLevel.INFO

# ── Parse ───────────────────────────────────────────────────────────

if not conf.parse(sys.argv):
    print("Errors in parsing!")
    conf.print_log()
    sys.exit(1)

print("Parsing is successful!")
print(f'\nValue of config "part2.subpart1.value1" = {conf["part2.subpart1.value1"].get_string()}')

# ── Export and reload ───────────────────────────────────────────────

print('\nSave to "demo_settings.json"...')
conf.serialize("demo_settings.json")

conf.load("demo_settings.json")
conf.print_values()
