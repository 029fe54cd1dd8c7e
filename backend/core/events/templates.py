"""HTML shells for the listing and error pages.

Page templates are filled with ``str.format``; STYLES and FILTER_SCRIPT are
passed in as values so their braces need no escaping.
"""

STYLES = """
    * { box-sizing: border-box; margin: 0; padding: 0; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      background: #0f172a; color: #e2e8f0; line-height: 1.6;
    }
    .container { max-width: 900px; margin: 0 auto; padding: 20px; }
    header { text-align: center; padding: 40px 0; }
    h1 { font-size: 2.5rem; background: linear-gradient(135deg, #60a5fa, #a78bfa);
         -webkit-background-clip: text; -webkit-text-fill-color: transparent; }
    .subtitle { color: #94a3b8; margin-top: 8px; }
    .filters { display: flex; gap: 12px; justify-content: center; margin: 20px 0; flex-wrap: wrap; }
    .filter-btn { padding: 8px 16px; border-radius: 20px; border: 1px solid #334155;
                  background: transparent; color: #94a3b8; cursor: pointer; transition: all 0.2s; }
    .filter-btn:hover, .filter-btn.active { background: #1e293b; border-color: #60a5fa; color: #fff; }
    .events { display: grid; gap: 16px; }
    .event-card { background: #1e293b; border-radius: 12px; padding: 20px;
                  border: 1px solid #334155; transition: transform 0.2s, border-color 0.2s; }
    .event-card:hover { transform: translateY(-2px); border-color: #60a5fa; }
    .event-header { display: flex; justify-content: space-between; align-items: start; gap: 12px; }
    .event-name { font-size: 1.25rem; font-weight: 600; color: #f1f5f9; }
    .event-badges { display: flex; gap: 8px; flex-shrink: 0; }
    .event-badge { padding: 4px 10px; border-radius: 12px; font-size: 0.75rem;
                   font-weight: 500; text-transform: uppercase; color: #fff; white-space: nowrap; }
    .deadline-badge { text-transform: none; }
    .event-meta { display: flex; gap: 16px; margin: 12px 0; color: #94a3b8; font-size: 0.9rem; flex-wrap: wrap; }
    .event-meta span { display: flex; align-items: center; gap: 4px; }
    .requirements, .tags { display: flex; gap: 8px; flex-wrap: wrap; margin: 8px 0; }
    .requirement { padding: 2px 8px; border-radius: 8px; font-size: 0.75rem; border: 1px solid; }
    .tag { padding: 2px 8px; border-radius: 8px; font-size: 0.75rem;
           background: #0f172a; color: #94a3b8; }
    .event-desc { color: #cbd5e1; margin: 12px 0; }
    .event-footer { display: flex; justify-content: space-between; align-items: center;
                    margin-top: 16px; padding-top: 16px; border-top: 1px solid #334155; }
    .event-fee { font-size: 1.5rem; font-weight: 700; color: #22c55e; }
    .event-spots { color: #94a3b8; }
    .event-actions { display: flex; gap: 8px; }
    .event-link { padding: 8px 16px; background: #3b82f6; color: white; border-radius: 8px;
                  text-decoration: none; font-weight: 500; }
    .event-link:hover { background: #2563eb; }
    .event-link.secondary { background: transparent; border: 1px solid #3b82f6; color: #93c5fd; }
    .empty { text-align: center; padding: 60px; color: #64748b; }
    @media (max-width: 640px) {
      .event-header { flex-direction: column; }
      .event-footer { flex-direction: column; gap: 12px; text-align: center; }
    }
"""

FILTER_SCRIPT = """
    document.querySelectorAll('.filter-btn').forEach(btn => {
      btn.addEventListener('click', () => {
        document.querySelectorAll('.filter-btn').forEach(b => b.classList.remove('active'));
        btn.classList.add('active');
        const filter = btn.dataset.filter;
        document.querySelectorAll('.event-card').forEach(card => {
          card.style.display = (filter === 'all' || card.dataset.category === filter) ? 'block' : 'none';
        });
      });
    });
"""

EVENTS_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{app_name} - Events Near You</title>
  <style>{styles}</style>
</head>
<body>
  <div class="container">
    <header>
      <h1>{app_name}</h1>
      <p class="subtitle">{subtitle}</p>
    </header>

    <div class="filters">
{filters}
    </div>

    <div class="events">
{events}
    </div>
  </div>

  <script>{script}</script>
</body>
</html>
"""

FILTER_BUTTON = '      <button class="{css}" data-filter="{value}">{label}</button>'

EMPTY_STATE = '      <div class="empty">No events found in your area. Check back soon!</div>'

EVENT_CARD = """      <div class="event-card" data-category="{category}">
        <div class="event-header">
          <div class="event-name">{name}</div>
          <div class="event-badges">{deadline_badge}
            <span class="event-badge" style="background: {category_color}">{category_label}</span>
          </div>
        </div>
        <div class="event-meta">
{meta}
        </div>{requirements}{tags}
        <p class="event-desc">{description}</p>
        <div class="event-footer">
          <div>
            <div class="event-fee">{fee}</div>
            <div class="event-spots">{spots}</div>
          </div>{actions}
        </div>
      </div>"""

DEADLINE_BADGE = """
            <span class="event-badge deadline-badge deadline-{severity}" style="background: {color}">{text}</span>"""

META_ITEM = "          <span>{icon} {text}</span>"

REQUIREMENT = '<span class="requirement" style="{style}">{icon} {label}</span>'

TAG = '<span class="tag">#{tag}</span>'

ACTION_LINK = '<a href="{href}" class="{css}" target="_blank" rel="noopener">{label}</a>'

ERROR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{app_name} - Error</title>
  <style>
    body {{ font-family: system-ui; background: #0f172a; color: #e2e8f0;
           display: flex; align-items: center; justify-content: center; min-height: 100vh; }}
    .error {{ text-align: center; padding: 40px; }}
    h1 {{ color: #f87171; }}
  </style>
</head>
<body>
  <div class="error">
    <h1>Something went wrong</h1>
    <p>{message}</p>
  </div>
</body>
</html>
"""
