# vvblogger

vvblogger turns one markdown note into an HTML page for a static blog. It
reads the note and converts its headings, emphasis, lists, paragraphs, links,
image embeds and wiki links. It then fills in a page template that you
write, and saves the result in your site's posts directory. It uses only
the standard library.

## Installing

```
pip install .
```

## Usage

```
vvblogger path/to/note.md
```

On every run the command first checks for a configuration file named
`config` in the `vvblogger` folder of your user configuration directory.
That folder is:

- `$XDG_CONFIG_HOME/vvblogger`, or `~/.config/vvblogger`, on Linux and
  other Unix systems;
- `~/Library/Application Support/vvblogger` on macOS;
- `%APPDATA%\vvblogger` on Windows.

If the file does not exist, the command creates it with these defaults:

```
SiteDir=<your home directory>
PostsDir=posts/
ImageDir=img/
SourceImageDir=
TemplateFile=
DateTimeFormat=2006-01-021504
```

Edit the file before you build a post, because `TemplateFile` starts out
empty. The command logs its progress. It exits with status 1 in these cases:

- no note is given;
- a file cannot be read or written;
- a time stamp does not match `DateTimeFormat`;
- the template cannot be rendered.

### Configuration keys

Every key is a `Key=value` line. Surrounding whitespace is trimmed, and
unknown keys are ignored. Paths are joined as plain strings, so give
directories a trailing `/`.

- `SiteDir`: the root of the site. A post is written to
  `SiteDir + PostsDir + <title>.html`.
- `PostsDir`: the posts directory, relative to `SiteDir`. Wiki links also
  point into it.
- `ImageDir`: where embedded local images are copied, relative to `SiteDir`.
- `SourceImageDir`: where local images are copied from.
- `TemplateFile`: the page template (see below).
- `DateTimeFormat`: the layout of the time stamps kept in the note's front
  matter. It is written with the reference time `Mon Jan 2 15:04:05 MST 2006`:
  - `2006` is the year and `01` the month;
  - `02` is the day, `15` the hour, `04` the minute and `05` the second;
  - `Jan`, `Monday`, `PM` and `.000` are also understood.

## Writing notes

A note may start with front matter between `---` lines. Every value in it
is written as a list item:

```
---
tags:
   - cooking
   - bread
uploaded:
   - 2024-05-011230
updated:
---
# Sourdough

Some *italic*, **bold**, ***both*** and ~~struck~~ text. Escape a marker
with a backslash: \*not italic\*.

- a list
  - nested by indenting with spaces
1. and an ordered one

[a link](https://example.com/page) and a [[Wiki Link]].
[a loaf](loaf.png)
```

How the note is converted:

- The first `#` heading becomes the post's title and its file name. It is
  not repeated in the body. Other headings become `<h1>` to `<h6>`.
- Blank lines are dropped.
- Plain text lines are wrapped in `<p>` tags.
- Lines starting with `-`, `+`, `*`, `1.`, `a.` or `iv.` become `<ul>` or
  `<ol>` items.
- A link whose file name ends in `.png`, `.jpg`, `.jpeg`, `.avif`, `.webp` or
  `.gif` becomes an `<img>`:
  - a local image is copied from `SourceImageDir` to `SiteDir + ImageDir` and
    linked as `img/<name>`;
  - a missing source image is only reported in the log.
- Other links become `<a>` tags.
- `[[Name]]` becomes a link to `PostsDir` + the URL-escaped name + `.html`.

### Time stamps

Building a post rewrites the note on disk:

- If the note has no `uploaded` value, the current time is inserted as a
  list item after every line that contains the word `uploaded`.
- The current time is always inserted after every line that contains the
  word `updated`.

The page shows the upload time and the newest update time, in the form
`01 May, 2024 at 12:30`.

## Templates

The template file is HTML with a small set of placeholders:

- `{{ template "content" . }}`: the converted post body.
- `{{ template "frontmatter" . }}`: the upload time, the update time and the
  tags.
- `{{ .Title }}`, `{{ .Body }}` and `{{ .FrontMatter.Tags }}`: fields of the
  post. They are HTML-escaped.
- `{{/* comments */}}`: comments.
- `{{- ` and ` -}}`: trim the whitespace next to a placeholder.

Any other action raises `vvblogger.builder.TemplateError`.

## Using it from Python

```python
from vvblogger.config import load_config
from vvblogger.converter import read
from vvblogger.builder import build

config = load_config()            # or load_config("/some/folder")
post = read("note.md", config)    # stamps times into note.md
page_path = build(post, config)
```

The pieces can also be used on their own:

- `vvblogger.text.handle_text` and `vvblogger.text.handle_paragraphs`;
- `vvblogger.lists.handle_lists`;
- `vvblogger.links.handle_links`;
- `vvblogger.converter.convert`, which takes note lines, the note's path and
  an optional fixed `now`;
- `vvblogger.builder.render_page`;
- `vvblogger.timefmt.format_time` and `vvblogger.timefmt.parse_time`, for
  reference-time layouts.

## What it does not do

vvblogger builds one post per run and nothing else:

- It does not make index or tag pages or feeds.
- It does not serve the site or upload it.
- It does not track which notes have been published.