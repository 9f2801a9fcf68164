"""
Optional fields: chained lookups with both representations.

Run: python examples/optional_fields.py
"""
from maybepy import Some, NOTHING, present, absent, chain, map, value_or, or_, from_nullable
from maybepy import nullable


def main():
    # Sum type: params may be missing, age lookup only runs when it is there
    users = {
        "ada": {"name": "Ada", "params": Some({"age": 36})},
        "bob": {"name": "Bob", "params": NOTHING},
    }
    for key in ("ada", "bob", "eve"):
        user = from_nullable(users.get(key))
        age = map(lambda p: p["age"], chain(lambda u: u["params"], user))
        print(f"{key}: age={value_or('unknown', age)}")

    # Fall back to a second source
    nick = or_(absent, present("anon"))
    print("nick:", nick)

    # Plain Optional values, no wrapper
    raw = {"name": "Soname", "params": {"age": 99}}
    print("raw age:", nullable.map(lambda p: p["age"], nullable.chain(lambda u: u["params"], raw)))


if __name__ == "__main__":
    main()
