from geoimage.main import run

run()
