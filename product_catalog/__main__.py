from product_catalog.main import run

run()
