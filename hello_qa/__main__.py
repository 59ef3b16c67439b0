from hello_qa.server import run

run()
