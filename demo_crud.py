from memdb.display import format_result
from memdb.executor import Executor

exe = Executor()

STEPS = [
    ("Creating table 'student'", "CREATE TABLE student (id int, name string, age int)"),
    ("Inserting rows", "INSERT INTO student (id, name, age) VALUES (1, 'Alice', 20)"),
    (None, "INSERT INTO student (id, name, age) VALUES (2, 'Bob', 21)"),
    (None, "INSERT INTO student (id, name, age) VALUES (3, 'Charlie', 22)"),
    ("Selecting all", "SELECT * FROM student"),
    ("Selecting name, age for id=2", "SELECT name, age FROM student WHERE id = 2"),
    ("Updating Bob's age", "UPDATE student SET age = 23 WHERE name = 'Bob'"),
    (None, "SELECT * FROM student WHERE name = 'Bob'"),
    ("Deleting id=3", "DELETE FROM student WHERE id = 3"),
    (None, "SELECT * FROM student"),
    ("Inserting a row with a missing column", "INSERT INTO student (id, name) VALUES (4, 'Dan')"),
    ("Deleting everything", "DELETE FROM student"),
    (None, "SELECT * FROM student"),
]

for title, sql in STEPS:
    if title:
        print(f"\n--- {title} ---")
    print(format_result(exe.try_execute(sql)))
