from app.build import build_site, output_file, page_paths


def test_page_paths_cover_every_location(app):
    paths = page_paths(app)
    assert paths[0] == "/"
    assert "/service-areas" in paths
    assert "/service-areas/pittsburgh-pa" in paths
    assert "/service-areas/philadelphia-pa/king-of-prussia-pa" in paths
    # 6 static pages + index + 5 hubs + 191 cities
    assert len(paths) == 203
    assert len(set(paths)) == len(paths)


def test_output_file_layout(tmp_path):
    assert output_file(tmp_path, "/") == tmp_path / "index.html"
    assert output_file(tmp_path, "/service-areas/a/b") == tmp_path / "service-areas" / "a" / "b" / "index.html"
    assert output_file(tmp_path, "/sitemap.xml") == tmp_path / "sitemap.xml"


def test_build_site_writes_every_page(app, tmp_path):
    out = tmp_path / "public"
    count = build_site(app, out)

    assert count == 205
    assert (out / "index.html").is_file()
    assert (out / "404.html").is_file()
    assert (out / "static" / "css" / "site.css").is_file()
    assert (out / "robots.txt").read_text(encoding="utf-8").startswith("User-agent: *")

    city = out / "service-areas" / "chambersburg-pa" / "waynesboro-pa" / "index.html"
    assert "DJ Services in Waynesboro, PA" in city.read_text(encoding="utf-8")

    sitemap = (out / "sitemap.xml").read_text(encoding="utf-8")
    assert sitemap.count("<url>") == 12


def test_clean_build_removes_stale_files(app, tmp_path):
    out = tmp_path / "public"
    out.mkdir()
    (out / "stale.html").write_text("old", encoding="utf-8")

    build_site(app, out)
    assert not (out / "stale.html").exists()


def test_build_site_command(runner, tmp_path):
    out = tmp_path / "site"
    result = runner.invoke(args=["build-site", "--output", str(out)])
    assert result.exit_code == 0, result.output
    assert "Generated 205 files" in result.output
    assert (out / "service-areas" / "index.html").is_file()
