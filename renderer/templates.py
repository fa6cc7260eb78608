"""Inline Jinja2 templates for the archive pages."""

BASE_CSS = """\
body {
  font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
  max-width: 1200px; margin: 0 auto; padding: 20px;
  background-color: #f5f5f5; color: #333; line-height: 1.5;
}
a { color: #007bff; text-decoration: none; }
a:hover { text-decoration: underline; }
.container { background: white; padding: 30px; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
.header { text-align: center; margin-bottom: 30px; }
.header h1 { margin: 0 0 10px; color: #1a1a1a; }
.subtitle { color: #666; }
.back-link { margin-bottom: 20px; }

/* event page */
.event-header { border-bottom: 2px solid #e0e0e0; padding-bottom: 20px; margin-bottom: 30px; }
.event-title { color: #1a1a1a; margin: 0 0 15px; font-size: 2.2em; font-weight: 600; }
.event-meta {
  display: grid; grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
  gap: 15px; margin: 20px 0; padding: 20px; background: #f8f9fa; border-radius: 6px;
}
.meta-item { display: flex; flex-direction: column; }
.meta-label { font-weight: 600; color: #555; font-size: 0.9em; text-transform: uppercase; margin-bottom: 5px; }
.stats-bar { display: flex; gap: 30px; padding: 15px 0; border-top: 1px solid #e0e0e0; margin-top: 20px; }
.stat { text-align: center; }
.stat-number { font-size: 1.8em; font-weight: bold; color: #007bff; }
.stat-label { color: #666; font-size: 0.9em; }
.section { margin: 40px 0; }
.section-title { border-bottom: 2px solid #007bff; padding-bottom: 10px; margin-bottom: 20px; font-size: 1.5em; }
.description { line-height: 1.6; color: #444; font-size: 1.1em; }
.photo-gallery { display: grid; grid-template-columns: repeat(auto-fill, minmax(200px, 1fr)); gap: 20px; }
.photo-item img { width: 100%; height: 150px; object-fit: cover; border-radius: 6px; }
.rsvps { display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 10px; }
.rsvp { padding: 12px 15px; background: #f8f9fa; border-radius: 6px; border-left: 4px solid #28a745; }
.rsvp.no { border-left-color: #dc3545; background: #fff5f5; }
.rsvp.waitlist { border-left-color: #ffc107; background: #fffbf0; }
.rsvp-header { display: flex; justify-content: space-between; align-items: center; flex-wrap: wrap; gap: 10px; }
.rsvp-response, .rsvp-status {
  font-size: 0.8em; font-weight: 600; text-transform: uppercase;
  padding: 2px 6px; border-radius: 3px; color: white; background-color: #28a745;
}
.rsvp-response.no, .rsvp-status.rsvp-no { background-color: #dc3545; }
.rsvp-response.waitlist, .rsvp-status.rsvp-waitlist { background-color: #ffc107; color: #333; }
.rsvp-date, .comment-date, .rsvp-guests { color: #666; font-size: 0.9em; }
.comment { border-left: 4px solid #007bff; padding: 15px; margin: 15px 0; background: #f8f9fa; }
.comment-header { display: flex; justify-content: space-between; margin-bottom: 10px; }

/* archive index */
.stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 15px; margin-bottom: 30px; }
.stat-card { background: white; padding: 20px; border-radius: 8px; text-align: center; box-shadow: 0 2px 6px rgba(0,0,0,0.08); }
.navigation { background: white; padding: 15px 20px; border-radius: 8px; margin-bottom: 30px; }
.nav-links { display: flex; flex-wrap: wrap; gap: 12px; align-items: center; }
.year-section { background: white; border-radius: 8px; margin-bottom: 30px; overflow: hidden; }
.year-header { background: #007bff; color: white; padding: 15px 20px; font-size: 1.3em; font-weight: 600; }
.event-row {
  display: grid; grid-template-columns: 160px 1fr 80px 80px; gap: 15px;
  padding: 12px 20px; border-bottom: 1px solid #eee; align-items: center;
}
.event-row:last-child { border-bottom: none; }
.event-date { color: #666; font-size: 0.9em; }
.venue { color: #666; font-size: 0.9em; }

/* attendees */
.attendees-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(250px, 1fr)); gap: 15px; }
.attendee-card { background: white; padding: 15px 20px; border-radius: 8px; }
.event-count { color: #666; font-size: 0.9em; }
.event { background: white; padding: 15px 20px; border-radius: 8px; margin-bottom: 12px; }
.event .event-title { font-size: 1.1em; margin: 4px 0; }
.event-meta-line { display: flex; gap: 15px; color: #666; font-size: 0.9em; }

@media (max-width: 768px) {
  .event-row { grid-template-columns: 1fr; }
  .stats { grid-template-columns: repeat(2, 1fr); }
}
"""

EVENT_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ event.title or 'Meetup Event' }}</title>
<style>{{ css|safe }}</style>
</head>
<body>
<div class="container">
<header class="event-header">
  <h1 class="event-title">{{ event.title or 'Meetup Event' }}</h1>
  <div class="event-meta">
    <div class="meta-item">
      <span class="meta-label">Date &amp; Time</span>
      <span class="meta-value">{{ event.date_time|format_datetime }}</span>
    </div>
    {% if event.duration %}
    <div class="meta-item">
      <span class="meta-label">Duration</span>
      <span class="meta-value">{{ event.duration|format_duration }}</span>
    </div>
    {% endif %}
    {% if event.venue %}
    <div class="meta-item">
      <span class="meta-label">Venue</span>
      <span class="meta-value">{{ event.venue.name }}{% if event.venue.address_line %}<br>{{ event.venue.address_line }}{% endif %}</span>
    </div>
    {% endif %}
    {% if event.group %}
    <div class="meta-item">
      <span class="meta-label">Group</span>
      <span class="meta-value">{{ event.group.name }}</span>
    </div>
    {% endif %}
    {% if event.event_url %}
    <div class="meta-item">
      <span class="meta-label">Event URL</span>
      <span class="meta-value"><a href="{{ event.event_url }}" target="_blank">View on Meetup</a></span>
    </div>
    {% endif %}
  </div>
  <div class="stats-bar">
    <div class="stat"><div class="stat-number">{{ photos|length }}</div><div class="stat-label">Photos</div></div>
    <div class="stat"><div class="stat-number">{{ event.comments|length }}</div><div class="stat-label">Comments</div></div>
    <div class="stat"><div class="stat-number">{{ event.rsvps|length }}</div><div class="stat-label">RSVPs</div></div>
    {% if event.photo_count %}
    <div class="stat"><div class="stat-number">{{ event.photo_count }}</div><div class="stat-label">Total Photos</div></div>
    {% endif %}
  </div>
</header>

{% if event.description %}
<section class="section">
  <h2 class="section-title">Description</h2>
  <div class="description">{{ event.description|format_description }}</div>
</section>
{% endif %}

{% if photos %}
<section class="section">
  <h2 class="section-title">Photos ({{ photos|length }})</h2>
  <div class="photo-gallery">
  {% for photo_id, filename in photos %}
    <div class="photo-item"><a href="photos/{{ filename }}" target="_blank"><img src="photos/{{ filename }}" alt="Event photo {{ photo_id }}" loading="lazy"></a></div>
  {% endfor %}
  </div>
</section>
{% endif %}

{% if rsvps %}
<section class="section">
  <h2 class="section-title">RSVPs ({{ rsvps|length }})</h2>
  <div class="rsvps">
  {% for rsvp in rsvps %}
    <div class="rsvp {{ rsvp.response|lower }}">
      <div class="rsvp-header">
        <strong>{{ rsvp.member.name if rsvp.member and rsvp.member.name else 'Anonymous' }}</strong>
        <span class="rsvp-response {{ rsvp.response|lower }}">{{ rsvp.response }}</span>
        <span class="rsvp-date">{{ rsvp.created|format_datetime }}</span>
      </div>
      {% if rsvp.guests > 0 %}<div class="rsvp-guests">+{{ rsvp.guests }} guest{{ 's' if rsvp.guests != 1 }}</div>{% endif %}
    </div>
  {% endfor %}
  </div>
</section>
{% endif %}

{% if event.comments %}
<section class="section">
  <h2 class="section-title">Comments ({{ event.comments|length }})</h2>
  <div class="comments">
  {% for comment in event.comments %}
    <div class="comment">
      <div class="comment-header">
        <strong>{{ comment.member.name if comment.member and comment.member.name else 'Anonymous' }}</strong>
        <span class="comment-date">{{ comment.created|format_datetime }}</span>
      </div>
      <div class="comment-text">{{ comment.text }}</div>
    </div>
  {% endfor %}
  </div>
</section>
{% endif %}
</div>
</body>
</html>
"""

INDEX_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ title }}</title>
<style>{{ css|safe }}</style>
</head>
<body>
<div class="header">
  <h1>{{ title }}</h1>
  <div class="subtitle">Archive of past events</div>
</div>

<div class="stats">
  <div class="stat-card"><div class="stat-number">{{ total_events }}</div><div class="stat-label">Total Events</div></div>
  <div class="stat-card"><div class="stat-number">{{ total_rsvps }}</div><div class="stat-label">Total RSVPs</div></div>
  <div class="stat-card"><div class="stat-number">{{ total_photos }}</div><div class="stat-label">Total Photos</div></div>
  <div class="stat-card"><div class="stat-number">{{ years|length }}</div><div class="stat-label">Years Active</div></div>
</div>

<div class="navigation">
  <div class="nav-links">
    <strong>Jump to year:</strong>
    {% for year, events in years %}<a href="#year-{{ year }}">{{ year }}</a>{% endfor %}
    <span style="margin-left: auto;"><a href="attendees/">View Attendees</a></span>
  </div>
</div>

{% for year, events in years %}
<div class="year-section" id="year-{{ year }}">
  <div class="year-header">{{ year }} ({{ events|length }} events)</div>
  <div class="events-list">
  {% for event in events %}
    <div class="event-row">
      <div class="event-date">{{ event.date|format_date }}</div>
      <div class="event-info">
        <div class="event-title"><a href="{{ events_link }}/{{ event.directory }}/">{{ event.title }}</a></div>
        {% if event.venue %}<div class="venue">{{ event.venue.name }}</div>{% endif %}
      </div>
      <div class="event-rsvps">{{ event.rsvp_count }} RSVPs</div>
      <div class="event-photos">{{ event.photo_count }} photos</div>
    </div>
  {% endfor %}
  </div>
</div>
{% endfor %}
</body>
</html>
"""

ATTENDEE_INDEX_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ title }} - Attendees</title>
<style>{{ css|safe }}</style>
</head>
<body>
<div class="back-link"><a href="../">&larr; Back to Events</a></div>
<div class="header">
  <h1>{{ title }} Attendees</h1>
  <p>{{ attendees|length }} members who have RSVP'd to events</p>
</div>
<div class="attendees-grid">
{% for attendee in attendees %}
  <div class="attendee-card">
    <div class="attendee-name"><a href="{{ attendee.id|urlencode }}.html">{{ attendee.name }}</a></div>
    <div class="event-count">{{ attendee.event_count }} event{{ 's' if attendee.event_count != 1 }}</div>
  </div>
{% endfor %}
</div>
</body>
</html>
"""

ATTENDEE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ attendee.name }} - {{ title }}</title>
<style>{{ css|safe }}</style>
</head>
<body>
<div class="back-link"><a href="index.html">&larr; Back to Attendees</a></div>
<div class="header">
  <h1>{{ attendee.name }}</h1>
  <p>Participated in {{ attendee.event_count }} event{{ 's' if attendee.event_count != 1 }}</p>
</div>
{% for entry in entries %}
<div class="event">
  <div class="event-date">{{ entry.event.date|format_date }}</div>
  <div class="event-title"><a href="{{ events_link }}/{{ entry.event.directory }}/">{{ entry.event.title }}</a></div>
  <div class="event-meta-line">
    <span class="rsvp-status rsvp-{{ entry.status|lower }}">{{ entry.status }}</span>
    <span>{{ entry.event.photo_count }} photos</span>
    {% if entry.event.venue %}<span>{{ entry.event.venue.name }}</span>{% endif %}
  </div>
</div>
{% endfor %}
</body>
</html>
"""
