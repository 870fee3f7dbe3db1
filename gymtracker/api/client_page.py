"""Single-page browser client served at `/`."""

CLIENT_PAGE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Gym Class Tracker</title>
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
        body { font-family: -apple-system, Arial, sans-serif; max-width: 720px; margin: 40px auto; padding: 0 16px; }
        .section { margin: 20px 0; padding: 15px; border: 1px solid #ddd; border-radius: 8px; }
        .stats { display: flex; gap: 12px; flex-wrap: wrap; }
        .stat { flex: 1; min-width: 120px; text-align: center; }
        .stat .value { font-size: 24px; font-weight: 600; color: #007aff; }
        input, textarea, button { padding: 8px; margin: 4px 0; font-size: 14px; }
        button { cursor: pointer; }
        table { width: 100%; border-collapse: collapse; }
        th, td { padding: 8px; text-align: left; border-bottom: 1px solid #ddd; }
        #toast { position: fixed; bottom: 20px; right: 20px; padding: 12px 16px; border-radius: 6px;
                 background: #333; color: #fff; display: none; }
        #toast.error { background: #c0392b; }
    </style>
</head>
<body>
    <h1>Gym Class Tracker</h1>
    <p id="greeting"></p>

    <div class="section">
        <h2>Overview</h2>
        <div>
            <button onclick="changeMonth(-1)">&lt;</button>
            <strong id="month-label"></strong>
            <button onclick="changeMonth(1)">&gt;</button>
        </div>
        <div class="stats" id="stats"></div>
    </div>

    <div class="section">
        <h2>Add Class</h2>
        <form id="add-form">
            <label>Date <input type="date" name="date" required></label>
            <label>Attendance <input type="number" name="attendance" min="0" value="0" required></label>
            <label>Notes <textarea name="notes" rows="2"></textarea></label>
            <button type="submit">Save</button>
        </form>
    </div>

    <div class="section">
        <h2>Classes</h2>
        <div id="classes"></div>
    </div>

    <div id="toast"></div>

    <script>
        let selectedMonth = new Date();
        selectedMonth.setDate(1);

        function monthParam() {
            const m = String(selectedMonth.getMonth() + 1).padStart(2, '0');
            return `${selectedMonth.getFullYear()}-${m}`;
        }

        function toast(message, isError) {
            const el = document.getElementById('toast');
            el.textContent = message;
            el.className = isError ? 'error' : '';
            el.style.display = 'block';
            setTimeout(() => { el.style.display = 'none'; }, 3000);
        }

        async function api(method, url, body) {
            const options = { method, headers: {} };
            if (body !== undefined) {
                options.headers['Content-Type'] = 'application/json';
                options.body = JSON.stringify(body);
            }
            const response = await fetch(url, options);
            if (response.status === 401) {
                toast('Unauthorized. You are logged out. Logging in again...', true);
                setTimeout(() => { window.location.href = '/api/login'; }, 500);
                throw new Error('Unauthorized');
            }
            if (!response.ok) {
                let message = response.statusText;
                try { message = (await response.json()).message || message; } catch (e) {}
                throw new Error(message);
            }
            return response.status === 204 ? null : response.json();
        }

        function readAttendance(value) {
            const n = parseInt(value, 10);
            return isNaN(n) || n < 0 ? 0 : n;
        }

        async function loadUser() {
            try {
                const user = await api('GET', '/api/auth/user');
                document.getElementById('greeting').textContent =
                    `Signed in as ${[user.firstName, user.lastName].filter(Boolean).join(' ') || user.id}`;
            } catch (error) {
                toast(error.message, true);
            }
        }

        async function loadStats() {
            document.getElementById('month-label').textContent = monthParam();
            const s = await api('GET', `/api/gym-classes/summary?month=${monthParam()}`);
            const items = [
                ['Total classes', s.totalClasses],
                ['This week', s.thisWeek],
                ['Avg attendance', s.averageAttendance],
                ['This month', s.monthlyClasses],
                ['1 person', s.singlePersonClasses],
                ['2+ people', s.multiplePersonClasses],
            ];
            document.getElementById('stats').innerHTML = items.map(([label, value]) =>
                `<div class="stat"><div class="value">${value}</div><div>${label}</div></div>`).join('');
        }

        async function loadClasses() {
            const div = document.getElementById('classes');
            const classes = await api('GET', '/api/gym-classes');
            if (classes.length === 0) {
                div.innerHTML = '<p>No classes recorded yet.</p>';
                return;
            }
            let html = '<table><tr><th>Date</th><th>Attendance</th><th>Notes</th><th></th></tr>';
            classes.forEach(c => {
                html += `<tr>
                    <td>${c.date}</td>
                    <td>${c.attendance}</td>
                    <td>${c.notes ? c.notes.replace(/</g, '&lt;') : ''}</td>
                    <td>
                        <button onclick="editClass('${c.id}', ${c.attendance})">Edit</button>
                        <button onclick="deleteClass('${c.id}')">Delete</button>
                    </td>
                </tr>`;
            });
            div.innerHTML = html + '</table>';
        }

        async function refresh() {
            try {
                await Promise.all([loadClasses(), loadStats()]);
            } catch (error) {
                toast(error.message, true);
            }
        }

        async function editClass(id, attendance) {
            const value = prompt('Attendance', attendance);
            if (value === null) return;
            try {
                await api('PATCH', `/api/gym-classes/${id}`, { attendance: readAttendance(value) });
                toast('Class updated');
                refresh();
            } catch (error) {
                toast(error.message, true);
            }
        }

        async function deleteClass(id) {
            if (!confirm('Delete this class?')) return;
            try {
                await api('DELETE', `/api/gym-classes/${id}`);
                toast('Class deleted');
                refresh();
            } catch (error) {
                toast(error.message, true);
            }
        }

        function changeMonth(direction) {
            selectedMonth.setMonth(selectedMonth.getMonth() + direction);
            loadStats().catch(error => toast(error.message, true));
        }

        document.getElementById('add-form').addEventListener('submit', async (event) => {
            event.preventDefault();
            const form = event.target;
            const payload = {
                date: form.date.value,
                attendance: readAttendance(form.attendance.value),
            };
            if (form.notes.value) payload.notes = form.notes.value;
            try {
                await api('POST', '/api/gym-classes', payload);
                toast('Class added');
                form.reset();
                form.date.value = new Date().toISOString().slice(0, 10);
                refresh();
            } catch (error) {
                toast(error.message, true);
            }
        });

        document.querySelector('#add-form [name=date]').value = new Date().toISOString().slice(0, 10);
        loadUser();
        refresh();
    </script>
</body>
</html>
"""
