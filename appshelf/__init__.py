# appshelf package
# Steam appinfo.vdf decoder and local library browser
